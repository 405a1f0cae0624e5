"""Persistência local de selfies."""

from app.infra.storage.local_selfie_storage import LocalSelfieStorage, decode_data_url

__all__ = ["LocalSelfieStorage", "decode_data_url"]
