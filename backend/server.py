import os
import logging
from dotenv import load_dotenv

# Early environment loading BEFORE building the app
try:
    here = os.path.dirname(os.path.abspath(__file__))
    root = os.path.dirname(here)
    load_dotenv(os.path.join(root, ".env"), override=False)
except OSError:
    pass

from todo_app.app import create_app


# No-op when uvicorn or the host process already configured the root logger
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s:%(name)s: %(message)s",
)
logger = logging.getLogger("todo_app.server")


app = create_app()


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info("serving on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
