"""일정 재생성 그래프 노드 모음."""

from app.graph.regenerate.nodes.adapt import adapt_activities
from app.graph.regenerate.nodes.generate import generate_activities
from app.graph.regenerate.nodes.merge import merge_day
from app.graph.regenerate.nodes.summarize import summarize

__all__ = ["generate_activities", "adapt_activities", "merge_day", "summarize"]
