import logging

import uvicorn
from lunch.api.api_run import app
from lunch.utilities.config import APP_HOST, APP_PORT, DEBUG, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if DEBUG else LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    print("Voice platform endpoint: POST /alexa")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
