import requests

from ..assemblers.prompt_assembler import build_messages
from ..config import AIServiceConfig
from ..models.observation import WeatherObservation
from ..models.result import NO_SUMMARY, Err, Ok, Result, UpstreamError
from ..models.validation import validate_payload
from ..utils.logger import log


class SummaryGateway:
    """
    날씨 관측값 -> AI 요약문.

    validate -> render -> call -> map 순서로 한 번만 돈다 (재시도 없음).
    결과는 항상 Ok(summary) 또는 Err(ValidationError | UpstreamError)이고
    requests 예외가 밖으로 나가지 않는다.
    """

    def __init__(self, config: AIServiceConfig | None = None, session: requests.Session | None = None):
        self.config = config or AIServiceConfig()
        self.session = session or requests.Session()

    def summarize(self, payload) -> Result:
        checked = validate_payload(WeatherObservation, payload)
        if isinstance(checked, Err):
            # 사용자 입력 오류: 서버 장애로 남기지 않는다
            log("AI 요약 입력 검증 실패", level="debug", errors=checked.error.errors)
            return checked

        observation: WeatherObservation = checked.value
        result = self._call_upstream(observation)

        if isinstance(result, Err):
            log(
                "❌ AI service error",
                level="error",
                exc_info=result.error.cause,
                exception=result.error.message,
                data=payload,
            )
        return result

    def build_request(self, observation: WeatherObservation) -> dict:
        return {
            "model": self.config.model,
            "messages": build_messages(observation),
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def _call_upstream(self, observation: WeatherObservation) -> Result:
        try:
            res = self.session.post(
                self.config.completions_url,
                headers=self._headers(),
                json=self.build_request(observation),
                timeout=self.config.timeout,
            )
        except requests.Timeout as e:
            return Err(UpstreamError(f"AI service request timed out after {self.config.timeout}s", e))
        except requests.RequestException as e:
            return Err(UpstreamError(f"AI service request failed: {e}", e))

        if not 200 <= res.status_code < 300:
            return Err(UpstreamError(f"AI service request failed: {res.status_code}"))

        try:
            body = res.json()
        except ValueError as e:
            return Err(UpstreamError("AI service returned a non-JSON body", e))

        return extract_summary(body)


def extract_summary(body) -> Result:
    """
    chat-completion 응답 -> Ok(content) / Ok(NO_SUMMARY, degraded) / Err(UpstreamError)

    choices[0].message.content 경로 중 어디든 비어 있으면 degraded 결과,
    타입이 아예 다르면 깨진 응답으로 본다.
    """
    if not isinstance(body, dict):
        return Err(UpstreamError("AI service returned a malformed body"))

    error = body.get("error")
    if error is not None:
        message = error.get("message") if isinstance(error, dict) else str(error)
        return Err(UpstreamError(f"AI service error: {message or 'Unknown error'}"))

    choices = body.get("choices")
    if choices is None or choices == []:
        return Ok(NO_SUMMARY, degraded=True)
    if not isinstance(choices, list) or not isinstance(choices[0], dict):
        return Err(UpstreamError("AI service returned malformed choices"))

    message = choices[0].get("message")
    if message is None:
        return Ok(NO_SUMMARY, degraded=True)
    if not isinstance(message, dict):
        return Err(UpstreamError("AI service returned a malformed message"))

    content = message.get("content")
    if content is None:
        return Ok(NO_SUMMARY, degraded=True)
    if not isinstance(content, str):
        return Err(UpstreamError("AI service returned non-text content"))

    return Ok(content)
