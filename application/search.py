"""Task filtering and search suggestions for the search overlay."""

from dataclasses import dataclass
from typing import Iterable, List

from core import BoardConfig, Task
from application.ui_store import Filter

MAX_SUGGESTIONS = 10
MIN_TEXT_QUERY = 2


@dataclass(frozen=True)
class SearchSuggestion:
    type: str
    value: str
    display: str


def matches_filter(task: Task, flt: Filter) -> bool:
    if flt.type == "tag":
        return flt.value in task.tags
    if flt.type == "category":
        return task.category == flt.value
    if flt.type == "user":
        return flt.value in task.assignees
    if flt.type == "priority":
        return flt.value.lower() in task.priority.lower()
    return True


def filter_tasks(tasks: Iterable[Task], query: str, filters: Iterable[Filter]) -> List[Task]:
    result = list(tasks)
    for flt in filters:
        result = [t for t in result if matches_filter(t, flt)]
    needle = query.strip().lower()
    if needle:
        result = [
            t for t in result
            if needle in t.title.lower() or needle in t.description.lower() or needle in t.notes.lower()
        ]
    return result


def search_results(task_store, ui_store) -> List[Task]:
    """Results listed under the search input; empty until a query or filter is set."""
    if not ui_store.search_query.strip() and not ui_store.active_filters:
        return []
    return filter_tasks(task_store.tasks, ui_store.search_query, ui_store.active_filters)


def build_suggestions(query: str, config: BoardConfig) -> List[SearchSuggestion]:
    query = query.strip()
    if not query:
        return []

    results: List[SearchSuggestion] = []
    if query.startswith("#"):
        needle = query[1:].lower()
        results.extend(SearchSuggestion("tag", tag, f"#{tag}") for tag in config.tags if needle in tag.lower())
    elif query.startswith("@"):
        needle = query[1:].lower()
        for user in config.users:
            if needle in user.id.lower() or needle in user.display_name.lower():
                results.append(SearchSuggestion("user", user.id, f"{user.id} ({user.display_name})"))
    elif query.startswith("!"):
        needle = query[1:].lower()
        for priority in config.priorities:
            if needle in priority.name.lower():
                results.append(SearchSuggestion("priority", priority.value, f"{priority.icon} {priority.name}"))
    else:
        needle = query.lower()
        results.extend(
            SearchSuggestion("category", category, category)
            for category in config.categories
            if needle in category.lower()
        )
        results.extend(SearchSuggestion("tag", tag, f"#{tag}") for tag in config.tags if needle in tag.lower())
        if len(query) >= MIN_TEXT_QUERY:
            results.append(SearchSuggestion("text", query, f'"{query}"'))

    return results[:MAX_SUGGESTIONS]


def apply_suggestion(ui_store, suggestion: SearchSuggestion) -> None:
    if suggestion.type == "text":
        ui_store.search_query = suggestion.value
        return
    ui_store.add_filter(Filter(suggestion.type, suggestion.value))
    ui_store.search_query = ""


__all__ = [
    "SearchSuggestion",
    "apply_suggestion",
    "build_suggestions",
    "filter_tasks",
    "matches_filter",
    "search_results",
]
