"""일정 재생성 그래프 워크플로우 구성."""

from langgraph.graph import END, StateGraph

from app.graph.regenerate.nodes import adapt_activities, generate_activities, merge_day, summarize
from app.graph.regenerate.state import RegenerateState


def _route_on_error(next_node: str):
    """오류가 있으면 즉시 종료하고, 없으면 다음 노드로 진행합니다."""

    def _route(state: RegenerateState) -> str:
        return END if state.get("error") else next_node

    return _route


def _create_regenerate_workflow() -> StateGraph:
    """일정 재생성 그래프 워크플로우를 생성합니다."""
    workflow = StateGraph(RegenerateState)

    workflow.add_node("generate_activities", generate_activities)
    workflow.add_node("adapt_activities", adapt_activities)
    workflow.add_node("merge_day", merge_day)
    workflow.add_node("summarize", summarize)

    workflow.set_entry_point("generate_activities")
    workflow.add_conditional_edges(
        "generate_activities",
        _route_on_error("adapt_activities"),
        ["adapt_activities", END],
    )
    workflow.add_conditional_edges("adapt_activities", _route_on_error("merge_day"), ["merge_day", END])
    workflow.add_conditional_edges("merge_day", _route_on_error("summarize"), ["summarize", END])
    workflow.add_edge("summarize", END)

    return workflow


compiled_regenerate_graph = _create_regenerate_workflow().compile()
