import atexit
from apscheduler.schedulers.background import BackgroundScheduler
from .logger import log


def cleanup_expired_tokens(auth_service):
    log("🧹 만료 토큰 정리 시작")
    try:
        removed = auth_service.purge_expired()
        log(f"✅ 만료 토큰 정리 완료: {removed}개 삭제")
        return removed
    except Exception as e:
        log(f"❌ 만료 토큰 정리 실패: {e}", level="error", exc_info=e)
        return 0


def start_scheduler(auth_service, minutes: int = 60) -> BackgroundScheduler:
    scheduler = BackgroundScheduler()
    scheduler.add_job(cleanup_expired_tokens, "interval", minutes=minutes, args=[auth_service],
                      id="token-cleanup", replace_existing=True)
    scheduler.start()
    atexit.register(lambda: scheduler.shutdown(wait=False))
    log("📅 토큰 정리 스케줄러가 시작되었습니다.")
    return scheduler
