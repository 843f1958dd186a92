import uvicorn

from . import config


def main():
    uvicorn.run(
        "recipe_browser.app:app",
        host=config.HOST,
        port=config.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
