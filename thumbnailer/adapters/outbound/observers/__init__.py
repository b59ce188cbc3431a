from thumbnailer.adapters.outbound.observers.logging_observer import LoggingThumbnailObserver

__all__ = ["LoggingThumbnailObserver"]
