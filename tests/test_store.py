"""
Tests for the JSON document store.
"""

import json
import os

from mindcompanion.store import DocumentStore


class TestUsers:

    def test_create_and_get(self, store):
        user = store.create_user({"email": "sam@example.com", "name": "Sam"})
        assert user["uid"]
        assert user["createdAt"]
        assert store.get_user(user["uid"])["email"] == "sam@example.com"

    def test_find_by_email_is_case_insensitive(self, store):
        user = store.create_user({"email": "sam@example.com"})
        uid, found = store.find_user_by_email("  SAM@example.com ")
        assert uid == user["uid"]
        assert found["email"] == "sam@example.com"

    def test_find_missing_email(self, store):
        assert store.find_user_by_email("nobody@example.com") == (None, None)

    def test_update_user(self, store):
        user = store.create_user({"email": "sam@example.com", "name": "Sam"})
        updated = store.update_user(user["uid"], {"name": "Samira"})
        assert updated["name"] == "Samira"
        assert store.get_user(user["uid"])["name"] == "Samira"

    def test_update_missing_user(self, store):
        assert store.update_user("missing", {"name": "x"}) is None

    def test_data_survives_new_instance(self, store):
        user = store.create_user({"email": "sam@example.com"})
        reopened = DocumentStore(store.data_dir)
        assert reopened.get_user(user["uid"])["email"] == "sam@example.com"

    def test_corrupt_users_file_reads_empty(self, store):
        with open(store.users_file, "w") as f:
            f.write("{not json")
        assert store.get_user("anything") is None


class TestChats:

    def test_create_chat_defaults(self, store):
        chat = store.create_chat("u1")
        assert chat["title"] == "New Chat"
        assert chat["messageCount"] == 0
        assert chat["lastMessage"] == ""
        assert chat["sharedMemory"] is True
        assert "messages" not in chat

    def test_list_chats_most_recent_first(self, store):
        first = store.create_chat("u1", title="first")
        second = store.create_chat("u1", title="second")
        store.update_chat("u1", first["id"], {"updatedAt": "2999-01-01T00:00:00"})
        chats = store.list_chats("u1")
        assert [c["id"] for c in chats] == [first["id"], second["id"]]

    def test_list_chats_limit(self, store):
        for i in range(7):
            store.create_chat("u1", title=str(i))
        assert len(store.list_chats("u1", limit=5)) == 5
        assert len(store.list_chats("u1")) == 7

    def test_chats_are_per_user(self, store):
        chat = store.create_chat("u1")
        assert store.get_chat("u2", chat["id"]) is None
        assert store.list_chats("u2") == []

    def test_update_chat_cannot_replace_id(self, store):
        chat = store.create_chat("u1")
        updated = store.update_chat("u1", chat["id"], {"id": "other", "title": "Renamed"})
        assert updated["id"] == chat["id"]
        assert updated["title"] == "Renamed"

    def test_update_missing_chat(self, store):
        assert store.update_chat("u1", "missing", {"title": "x"}) is None

    def test_delete_chat_removes_messages(self, store):
        chat = store.create_chat("u1")
        store.add_message("u1", chat["id"], "hi", "user")
        assert store.delete_chat("u1", chat["id"]) is True
        assert store.get_chat("u1", chat["id"]) is None
        assert store.list_messages("u1", chat["id"]) is None
        assert store.delete_chat("u1", chat["id"]) is False

    def test_uid_is_sanitised_in_path(self, store):
        store.create_chat("../evil")
        assert os.path.exists(os.path.join(store.chats_dir, "evil.json"))


class TestMessages:

    def test_messages_in_order(self, store):
        chat = store.create_chat("u1")
        store.add_message("u1", chat["id"], "first", "user")
        store.add_message("u1", chat["id"], "second", "ai")
        messages = store.list_messages("u1", chat["id"])
        assert [m["text"] for m in messages] == ["first", "second"]
        assert [m["sender"] for m in messages] == ["user", "ai"]

    def test_add_message_to_missing_chat(self, store):
        assert store.add_message("u1", "missing", "hello", "user") is None

    def test_messages_written_as_json(self, store):
        chat = store.create_chat("u1")
        store.add_message("u1", chat["id"], "hello", "user")
        with open(store._chats_path("u1")) as f:
            data = json.load(f)
        assert data[chat["id"]]["messages"][0]["text"] == "hello"
