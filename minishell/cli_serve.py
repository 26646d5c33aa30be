import uvicorn

from minishell.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from minishell.main:app
    uvicorn.run("minishell.main:app", host=settings.api_host, port=settings.api_port)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
