from collections.abc import Mapping
from types import MappingProxyType

import msgspec
from msgspec.structs import force_setattr


class MediaRange(msgspec.Struct, frozen=True):
    type: str
    subtype: str
    params: Mapping[str, str]
    generic_subtype: str

    def __post_init__(self) -> None:
        # read-only view over a private copy
        force_setattr(self, "params", MappingProxyType(dict(self.params)))

    @property
    def quality(self) -> float:
        return float(self.params.get("q", "1"))


class ScoredCandidate(msgspec.Struct, frozen=True, order=True):
    # field order is the ranking order
    quality: float
    fitness: int
    preference: int
    mime_type: str


class ParseResult(msgspec.Struct):
    accept: str
    ranges: list[MediaRange]


class QualityResult(msgspec.Struct):
    media_type: str
    accept: str
    quality: float


class BestMatchResult(msgspec.Struct):
    supported: list[str]
    accept: str
    match: str | None


def _enc_hook(obj: object) -> object:
    if isinstance(obj, MappingProxyType):
        return dict(obj)
    raise NotImplementedError(f"Objects of type {type(obj)} are not supported")


json_encoder = msgspec.json.Encoder(enc_hook=_enc_hook)
