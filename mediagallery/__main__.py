"""Run the gallery backend with uvicorn: python -m mediagallery"""
import uvicorn

from .config import HOST, PORT, LOG_LEVEL


def main():
    uvicorn.run("mediagallery.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
