from thumbnailer.application.dto.series_request import SeriesRequest

__all__ = ["SeriesRequest"]
