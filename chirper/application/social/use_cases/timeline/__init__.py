from .get_timeline_use_case import GetTimelineUseCase, TimelineEntry, TimelineResult

__all__ = ["GetTimelineUseCase", "TimelineEntry", "TimelineResult"]
