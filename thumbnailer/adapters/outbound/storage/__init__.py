from thumbnailer.adapters.outbound.storage.local_scratch_storage import LocalScratchStorage

__all__ = ["LocalScratchStorage"]
