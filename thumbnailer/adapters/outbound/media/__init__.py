from thumbnailer.adapters.outbound.media.pil_filmstrip import PILFilmstripComposer

__all__ = ["PILFilmstripComposer"]
