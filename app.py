import os
import logging

from mindcompanion import create_app
from mindcompanion.config import IS_DEPLOYED

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 7860))
    debug_mode = os.environ.get("FLASK_ENV") != "production"

    logger.info(f"Starting MindCompanion on port {port} | Debug: {debug_mode} | Deployed: {IS_DEPLOYED}")
    app.run(host="0.0.0.0", port=port, debug=debug_mode)
