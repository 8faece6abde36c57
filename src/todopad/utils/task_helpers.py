"""Task helper utilities."""

from todopad.models import NotFoundError, Task
from todopad.utils.ui.formatters import calculate_unique_suffixes


def resolve_task(tasks: list[Task], task_id_or_suffix: str) -> Task:
    """
    Resolve a task ID or ID suffix to a task.

    An exact ID match wins; otherwise the reference must be the suffix of
    exactly one task ID.

    Args:
        tasks: Tasks to search
        task_id_or_suffix: Full task ID or suffix to resolve

    Returns:
        The matching task

    Raises:
        NotFoundError: If no task matches
        ValueError: If the suffix matches more than one task
    """
    ref = task_id_or_suffix.strip()
    for task in tasks:
        if task.id == ref:
            return task

    matching = [task for task in tasks if ref and task.id.endswith(ref)]
    if not matching:
        raise NotFoundError(ref)

    if len(matching) > 1:
        suffix_map = calculate_unique_suffixes([t.id for t in tasks])
        suggestions = []
        for task in matching:
            title = task.title
            if len(title) > 70:
                title = title[:67] + "..."
            suggestions.append(f"  [{task.id[-suffix_map[task.id]:]}] {title}")
        raise ValueError(
            f"Multiple tasks match suffix '{ref}':\n"
            + "\n".join(suggestions)
            + "\n\nUse the suffix in brackets to select a specific task."
        )

    return matching[0]
