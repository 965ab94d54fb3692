from todolist.settings import TodoListSettings
from todolist.web import create_app
import argparse
import logging

logger = logging.getLogger("todolist")


def main(argv=None):
    parser = argparse.ArgumentParser(description="In-memory todo list web server")
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    parser.add_argument("--debug", action="store_true", default=None)
    parser.add_argument("--seed-file", dest="seed_file")
    parser.add_argument("--log-level", dest="log_level")
    args = parser.parse_args(argv)

    user_settings = {
        key.upper(): value for key, value in vars(args).items() if value is not None
    }
    settings = TodoListSettings(user_settings=user_settings)

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings=settings)
    logger.info("Server started http://%s:%s", settings.HOST, settings.PORT)
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG)


if __name__ == "__main__":
    main()
