from .boundary import check_request, check_response
from .emitters.types import project
from .endpoint import Endpoint
from .errors import PathTemplateError, ShapeKitError, ValidationError
from .export import generate_client, save_to_file
from .paths import parse_path
from .schema import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    AllOf,
    AnyOf,
    ArrayOf,
    Field,
    Literal,
    MapOf,
    OneOf,
    Primitive,
    Refined,
    Shape,
    as_schema,
)
from .validator import is_valid, validate

__version__ = "0.1.0"
