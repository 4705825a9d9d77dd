"""Flask web backend for git-rewind"""

from flask import Flask
from dotenv import load_dotenv

load_dotenv()

from rewind.api import stats_bp
from rewind.config import FLASK_PORT

app = Flask(__name__)
app.register_blueprint(stats_bp)


if __name__ == "__main__":
    app.run(debug=True, port=FLASK_PORT)
