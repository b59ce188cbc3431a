from thumbnailer.core.value_objects.thumbnail_request import ThumbnailRequest
from thumbnailer.core.value_objects.thumbnail_result import FailureReason, ThumbnailResult

__all__ = ["ThumbnailRequest", "ThumbnailResult", "FailureReason"]
