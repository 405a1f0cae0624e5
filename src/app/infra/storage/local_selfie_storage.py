"""Gravação de selfies grandes no diretório de uploads.

Selfies acima do limite inline não seguem no payload do n8n; são
gravadas aqui e referenciadas por URL pública (/uploads/<arquivo>).
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
import time
import uuid
from pathlib import Path

from utils.errors import SelfieDecodeError

logger = logging.getLogger(__name__)

_DATA_URL_PATTERN = re.compile(r"^data:image/(\w+);base64,")


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Extrai subtipo e bytes de uma data URL de imagem.

    Args:
        data_url: String no formato data:image/<subtipo>;base64,<dados>

    Returns:
        (subtipo, bytes decodificados)

    Raises:
        SelfieDecodeError: Se o prefixo não casar ou o base64 for inválido.
    """
    match = _DATA_URL_PATTERN.match(data_url)
    if match is None:
        raise SelfieDecodeError("data_url_prefix_mismatch")

    encoded = data_url[data_url.index(",") + 1 :]
    # Clientes que omitem o padding "=" também são aceitos
    encoded += "=" * (-len(encoded) % 4)
    try:
        return match.group(1), base64.b64decode(encoded)
    except (binascii.Error, ValueError) as exc:
        raise SelfieDecodeError("invalid_base64") from exc


def _unique_token() -> str:
    # 13 caracteres hex, mesmo tamanho dos nomes já gravados em produção
    return uuid.uuid4().hex[:13]


class LocalSelfieStorage:
    """Grava selfies em disco local."""

    def __init__(self, uploads_dir: str | Path) -> None:
        self._uploads_dir = Path(uploads_dir)

    @property
    def uploads_dir(self) -> Path:
        return self._uploads_dir

    def save(self, data_url: str) -> str | None:
        """Decodifica e grava a selfie.

        Returns:
            Nome do arquivo gravado, ou None em qualquer falha.
        """
        try:
            image_type, image_bytes = decode_data_url(data_url)
        except SelfieDecodeError as exc:
            logger.warning("selfie_decode_failed", extra={"reason": str(exc)})
            return None

        filename = f"selfie_{int(time.time())}_{_unique_token()}.{image_type}"
        try:
            self._uploads_dir.mkdir(parents=True, exist_ok=True)
            (self._uploads_dir / filename).write_bytes(image_bytes)
        except OSError as exc:
            logger.warning(
                "selfie_write_failed",
                extra={"error_type": type(exc).__name__, "uploads_dir": str(self._uploads_dir)},
            )
            return None

        logger.info(
            "selfie_saved",
            extra={"image_type": image_type, "size_bytes": len(image_bytes)},
        )
        return filename
