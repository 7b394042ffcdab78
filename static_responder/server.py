import argparse
import socket
import sys

import rich

from static_responder import handlers  # noqa: F401  registers the routes
from static_responder.connection import handle_request
from static_responder.routes import seal_routes
from static_responder.settings import settings

logger = settings.logger


def serve_forever(tcp_server):
    # One connection at a time; a client that never finishes its request
    # blocks everyone else since there are no timeouts.
    while True:
        client_socket, addr = tcp_server.accept()
        with client_socket:
            handle_request(client_socket, addr)
        logger.info(f"Connection to {addr[0]} closed")


def start_server():
    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as tcp_server:
        tcp_server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            tcp_server.bind((settings.HOST, settings.PORT))
        except OSError as e:
            rich.print(f"[red]Could not bind {settings.HOST}:{settings.PORT}: {e}[/red]")
            sys.exit(1)
        tcp_server.listen(5)
        logger.info(
            f"Server is running on http://{settings.HOST}:{settings.PORT}"
        )
        try:
            serve_forever(tcp_server)
        except KeyboardInterrupt:
            logger.info("Shutting down")


def main():
    parser = argparse.ArgumentParser(description="Static HTTP responder")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to run the server on")

    args = parser.parse_args()

    if args.port:
        settings.configure(PORT=args.port)

    if args.host:
        settings.configure(HOST=args.host)

    seal_routes()
    start_server()


if __name__ == "__main__":
    main()
