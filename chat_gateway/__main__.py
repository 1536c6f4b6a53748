"""python -m chat_gateway：以 uvicorn 启动 HTTP 服务。"""

import uvicorn

from chat_gateway.config.settings import settings


def main() -> None:
    uvicorn.run("chat_gateway.api.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
