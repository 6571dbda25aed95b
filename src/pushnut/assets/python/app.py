import os

from flask import Flask

app = Flask(__name__)


@app.route("/")
def hello():
    return "Hello from the pushnut Python sample app!\n"


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
