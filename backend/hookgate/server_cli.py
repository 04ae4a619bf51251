"""CLI entry point for the hookgate webhook server."""

import argparse


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="hookgate-server",
        description="Receive and verify Forgejo and GitHub webhooks",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8080, help="Bind port (default: 8080)")
    parser.add_argument(
        "--log-level", default="info", help="uvicorn log level (default: info)"
    )
    args = parser.parse_args(argv)

    import uvicorn

    uvicorn.run("hookgate.main:app", host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
