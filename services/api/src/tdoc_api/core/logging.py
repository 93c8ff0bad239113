"""日志初始化。"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """初始化日志输出格式与级别。

    根日志器已被外部（例如 uvicorn 或测试框架）配置时，只调整本服务日志器级别。
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tdoc_api").setLevel(level)
