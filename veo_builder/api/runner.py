"""Entry point for serving the API with uvicorn."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    """Start the HTTP server."""

    uvicorn.run(
        "veo_builder.api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
