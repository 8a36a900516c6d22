# utils/logger.py

import logging

from ..config import LOG_LEVEL

# 로그 포맷 설정
FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO), format=FORMAT)

logger = logging.getLogger("weatherdash")

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


# 공통 log() 함수 정의
def log(msg, level="info", exc_info=None, **context):
    """
    사용 예:
    log("시작됨")
    log("AI 서비스 오류", level="error", exc_info=e, data=payload)

    context 키워드는 "key=value" 형태로 메시지 뒤에 붙는다.
    """
    if context:
        extra = " ".join(f"{key}={value!r}" for key, value in context.items())
        msg = f"{msg} | {extra}"
    logger.log(LEVELS.get(level, logging.INFO), msg, exc_info=exc_info)
