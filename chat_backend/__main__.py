# python -m chat_backend
import uvicorn

from chat_backend.config import HOST, PORT


def main() -> None:
    uvicorn.run("chat_backend.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
