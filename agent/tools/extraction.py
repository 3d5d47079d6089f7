"""
Result extraction: locate the output URL in an upstream payload.

Backends wrap their output at different depths, so each media kind has an
ordered list of shape probes (most specific first). The first probe that
finds a non-empty URL wins; no probe matching is not an error here.

  Kind    Probe order
  ──────  ──────────────────────────────────────────────────────────────
  image   images[] → image.url → image_url → output.url → url
  video   video.url → video_url → output.url → url
  audio   audio.url → audio_url → audio_file.url → output.url → url
  3d      model.url → model_url → mesh.url → model_mesh.url → output.url
          → glb.url → model_glb.url → url
"""

from typing import Any, Callable, List, Optional, Sequence

from agent.tools.base import MediaKind


Probe = Callable[[Any], Optional[str]]


def _url(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def nested(field: str) -> Probe:
    """Probe for {field: {"url": ...}}."""

    def probe(data: Any) -> Optional[str]:
        inner = data.get(field)
        if isinstance(inner, dict):
            return _url(inner.get("url"))
        return None

    probe.__name__ = f"{field}.url"
    return probe


def flat(field: str) -> Probe:
    """Probe for {field: "..."}."""

    def probe(data: Any) -> Optional[str]:
        return _url(data.get(field))

    probe.__name__ = field
    return probe


IMAGE_PROBES: Sequence[Probe] = (
    nested("image"),
    flat("image_url"),
    nested("output"),
    flat("url"),
)

VIDEO_PROBES: Sequence[Probe] = (
    nested("video"),
    flat("video_url"),
    nested("output"),
    flat("url"),
)

AUDIO_PROBES: Sequence[Probe] = (
    nested("audio"),
    flat("audio_url"),
    nested("audio_file"),
    nested("output"),
    flat("url"),
)

MODEL_3D_PROBES: Sequence[Probe] = (
    nested("model"),
    flat("model_url"),
    nested("mesh"),
    nested("model_mesh"),
    nested("output"),
    nested("glb"),
    nested("model_glb"),
    flat("url"),
)


def first_match(data: Any, probes: Sequence[Probe]) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    for probe in probes:
        url = probe(data)
        if url:
            return url
    return None


def extract_image_urls(data: Any) -> List[str]:
    """
    All image URLs in the payload.

    A list under `images` wins over every singular location; its items may be
    bare strings or objects with a `url`.
    """
    if not isinstance(data, dict):
        return []

    images = data.get("images")
    if isinstance(images, list):
        urls = []
        for item in images:
            url = _url(item.get("url")) if isinstance(item, dict) else _url(item)
            if url:
                urls.append(url)
        return urls

    url = first_match(data, IMAGE_PROBES)
    return [url] if url else []


def extract_video_url(data: Any) -> Optional[str]:
    return first_match(data, VIDEO_PROBES)


def extract_audio_url(data: Any) -> Optional[str]:
    return first_match(data, AUDIO_PROBES)


def extract_3d_url(data: Any) -> Optional[str]:
    return first_match(data, MODEL_3D_PROBES)


def extract_urls(kind: MediaKind, data: Any) -> List[str]:
    """Extracted URLs for a media kind, primary first."""
    if kind is MediaKind.IMAGE:
        return extract_image_urls(data)

    single = {
        MediaKind.VIDEO: extract_video_url,
        MediaKind.AUDIO: extract_audio_url,
        MediaKind.MODEL_3D: extract_3d_url,
    }[kind](data)
    return [single] if single else []
