"""
Server entrypoint for the profession analyzer.

Runs the FastAPI app factory `ai_vs_professions.api.http_api.create_app` under
uvicorn, so the app (and its logging setup) only exists in the server process.
Bind address comes from `HOST` / `PORT` (defaults `127.0.0.1:8000`).
"""

import os

import uvicorn
from dotenv import load_dotenv


def main():
    load_dotenv()
    uvicorn.run(
        "ai_vs_professions.api.http_api:create_app",
        factory=True,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
