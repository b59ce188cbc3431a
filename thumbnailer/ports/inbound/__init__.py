from thumbnailer.ports.inbound.generate_thumbnails_use_case import GenerateThumbnailsUseCase

__all__ = ["GenerateThumbnailsUseCase"]
