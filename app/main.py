import uvicorn
from dotenv import load_dotenv

load_dotenv()

from server import server  # noqa: E402

server_app = server.handler


def main():
    """Run the relay with uvicorn on the configured port."""
    settings = server.settings
    uvicorn.run(server_app, host="0.0.0.0", port=settings.server.PORT)


if __name__ == "__main__":
    main()
