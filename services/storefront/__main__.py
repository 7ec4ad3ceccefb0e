import uvicorn

from storefront.config import HOST, PORT
from storefront.main import app


def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
