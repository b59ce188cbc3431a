from thumbnailer.core.events.series_events import SeriesCompleted, SeriesEvent, SeriesProgress

__all__ = ["SeriesProgress", "SeriesCompleted", "SeriesEvent"]
