from __future__ import annotations
import logging
import pathlib
from typing import Callable, Iterable, Union

from .emitters import typed as emit_typed, untyped as emit_untyped
from .endpoint import Endpoint
from .errors import ExportError

logger = logging.getLogger(__name__)

Generator = Callable[[Endpoint], str]

GENERATORS: dict[str, Generator] = {
    "untyped": emit_untyped.project,
    "typed": emit_typed.project,
}


def resolve_generator(flavor: Union[str, Generator]) -> Generator:
    generator = flavor if callable(flavor) else GENERATORS.get(flavor)
    if generator is None:
        raise ExportError("Invalid generator function")
    return generator


def generate_client(endpoints: Iterable[Endpoint], flavor: Union[str, Generator] = "typed") -> str:
    generator = resolve_generator(flavor)
    return "".join(generator(endpoint) + "\n" for endpoint in endpoints)


def save_to_file(endpoints: Iterable[Endpoint], path: Union[str, pathlib.Path, None],
                 flavor: Union[str, Generator] = "typed") -> pathlib.Path:
    if not path:
        raise ExportError("Missing output file path")
    endpoints = list(endpoints)
    content = generate_client(endpoints, flavor)
    target = pathlib.Path(path)
    target.write_text(content, encoding="utf-8")
    logger.info("wrote %d endpoint(s) to %s", len(endpoints), target)
    return target
