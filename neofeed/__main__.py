import uvicorn

from .config import HOST, PORT


def main():
    uvicorn.run("neofeed.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
