"""Development entry point: ``python app.py`` or ``flask --app app run``."""

import os

from src.teamin.teamin.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("SERVER_PORT", "2022")), debug=app.config["DEBUG"])
