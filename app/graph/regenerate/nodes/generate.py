"""활동 생성기 호출 노드."""

from __future__ import annotations

from langchain_core.runnables import RunnableConfig

from app.core.logger import get_logger
from app.graph.regenerate.state import RegenerateState
from app.services.activity_generator import (
    ActivityGenerationError,
    ActivityGeneratorProtocol,
    get_activity_generator,
)

logger = get_logger(__name__)


async def generate_activities(state: RegenerateState, config: RunnableConfig) -> RegenerateState:
    """대상 일차의 활동 후보를 생성기에서 받아옵니다."""
    theme = state.get("theme")
    region = state.get("region")
    day_number = state.get("day_number")

    if not state.get("timeline") or not theme or not region or not day_number:
        return {**state, "error": "generate_activities에는 timeline, theme, region, day_number가 필요합니다."}

    generator: ActivityGeneratorProtocol | None = config.get("configurable", {}).get("activity_generator")
    if generator is None:
        try:
            generator = get_activity_generator()
        except ActivityGenerationError as exc:
            logger.error("ActivityGenerator initialization failed: %s", exc)
            return {**state, "error": "활동 생성기가 설정되지 않았습니다."}

    try:
        raw_response = await generator.generate(
            theme=theme,
            region=region,
            prefecture=state.get("prefecture"),
            day_number=day_number,
        )
    except ActivityGenerationError as exc:
        logger.error("활동 생성 실패: day=%s error=%s", day_number, exc)
        return {**state, "error": str(exc)}

    return {**state, "raw_response": raw_response}
