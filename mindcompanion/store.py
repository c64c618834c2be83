"""JSON-file document store for users, chats and chat messages.

Layout under ``data_dir``::

    users.json            {uid: user document}
    chats/<uid>.json      {chat_id: chat document with its "messages" list}

All reads and writes go through one lock, so a store instance can be shared by
request threads.
"""
import os
import re
import json
import uuid
import logging
import threading
from datetime import datetime

logger = logging.getLogger(__name__)


def now():
    return datetime.now().isoformat()


class DocumentStore:
    def __init__(self, data_dir):
        self.data_dir = data_dir
        self.users_file = os.path.join(data_dir, "users.json")
        self.chats_dir = os.path.join(data_dir, "chats")
        self.lock = threading.RLock()
        os.makedirs(self.chats_dir, exist_ok=True)
        if not os.path.exists(self.users_file):
            with self.lock:
                self._write(self.users_file, {})

    # -- files --------------------------------------------------------------

    def _read(self, path):
        if not os.path.exists(path):
            return {}
        try:
            with open(path, "r") as f:
                return json.load(f)
        except ValueError as e:
            logger.error(f"Corrupt store file {path}: {e}")
            return {}

    def _write(self, path, data):
        tmp_path = path + ".tmp"
        with open(tmp_path, "w") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, path)

    def _chats_path(self, uid):
        safe_uid = re.sub(r'[^a-zA-Z0-9_-]', '', uid)
        return os.path.join(self.chats_dir, f"{safe_uid}.json")

    # -- users --------------------------------------------------------------

    def get_user(self, uid):
        with self.lock:
            return self._read(self.users_file).get(uid)

    def find_user_by_email(self, email):
        email = email.strip().lower()
        with self.lock:
            for uid, user in self._read(self.users_file).items():
                if user.get("email") == email:
                    return uid, user
        return None, None

    def create_user(self, document):
        uid = uuid.uuid4().hex
        with self.lock:
            users = self._read(self.users_file)
            users[uid] = dict(document, uid=uid, createdAt=now())
            self._write(self.users_file, users)
            logger.info(f"Created user document {uid}")
            return users[uid]

    def update_user(self, uid, fields):
        with self.lock:
            users = self._read(self.users_file)
            if uid not in users:
                return None
            users[uid].update(fields)
            self._write(self.users_file, users)
            return users[uid]

    # -- chats --------------------------------------------------------------

    @staticmethod
    def _chat_summary(chat):
        return {k: v for k, v in chat.items() if k != "messages"}

    def list_chats(self, uid, limit=None):
        with self.lock:
            chats = self._read(self._chats_path(uid)).values()
        ordered = sorted(chats, key=lambda c: c["updatedAt"], reverse=True)
        if limit is not None:
            ordered = ordered[:limit]
        return [self._chat_summary(c) for c in ordered]

    def create_chat(self, uid, title="New Chat", shared_memory=True):
        timestamp = now()
        chat = {
            "id": uuid.uuid4().hex,
            "title": title,
            "createdAt": timestamp,
            "updatedAt": timestamp,
            "messageCount": 0,
            "lastMessage": "",
            "sharedMemory": shared_memory,
            "messages": [],
        }
        with self.lock:
            path = self._chats_path(uid)
            chats = self._read(path)
            chats[chat["id"]] = chat
            self._write(path, chats)
        return self._chat_summary(chat)

    def get_chat(self, uid, chat_id):
        with self.lock:
            chat = self._read(self._chats_path(uid)).get(chat_id)
        return self._chat_summary(chat) if chat else None

    def update_chat(self, uid, chat_id, fields):
        with self.lock:
            path = self._chats_path(uid)
            chats = self._read(path)
            if chat_id not in chats:
                return None
            fields = {k: v for k, v in fields.items() if k not in ("id", "messages")}
            chats[chat_id].update(fields)
            self._write(path, chats)
            return self._chat_summary(chats[chat_id])

    def delete_chat(self, uid, chat_id):
        with self.lock:
            path = self._chats_path(uid)
            chats = self._read(path)
            if chats.pop(chat_id, None) is None:
                return False
            self._write(path, chats)
        logger.info(f"Deleted chat {chat_id} for user {uid}")
        return True

    # -- messages -----------------------------------------------------------

    def add_message(self, uid, chat_id, text, sender):
        message = {"id": uuid.uuid4().hex, "text": text, "sender": sender, "timestamp": now()}
        with self.lock:
            path = self._chats_path(uid)
            chats = self._read(path)
            if chat_id not in chats:
                return None
            chats[chat_id]["messages"].append(message)
            self._write(path, chats)
        return message

    def list_messages(self, uid, chat_id):
        with self.lock:
            chat = self._read(self._chats_path(uid)).get(chat_id)
        if chat is None:
            return None
        return sorted(chat["messages"], key=lambda m: m["timestamp"])
