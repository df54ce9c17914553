import uvicorn

from formbot.config import settings


def main():
    uvicorn.run("formbot.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
