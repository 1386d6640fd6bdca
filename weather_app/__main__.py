from __future__ import annotations

from . import create_app


def main() -> None:
    app = create_app()
    app.logger.info("Weather app listening on port %s", app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"])


if __name__ == "__main__":
    main()
