"""Local/Vercel entrypoint.

Exposes an `app` object for platforms that look for one in `main.py`.
"""

from lotto_report import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=False)
