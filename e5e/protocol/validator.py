from typing import Any, Dict
from enum import Enum
import json

from importlib.resources import files
from referencing import Registry, Resource
from jsonschema import Draft202012Validator


SCHEMA_VERSION = "1.0"


class ProtocolError(RuntimeError):
    """Raised when a document does not match its e5e schema."""


class SchemaName(Enum):
    OUTPUT = "output"
    RETURN = "return"


class EnvelopeValidator:
    """
    Checks outgoing e5e documents against the packaged JSON schemas.
    """

    def __init__(self) -> None:
        self._registry = self._load_all_schemas()
        self._validators = self._load_validators()

    # ----------------------------
    # Schema loading
    # ----------------------------

    @staticmethod
    def _schema_dir():
        return files("e5e.protocol.schemas") / "e5e" / SCHEMA_VERSION

    def _load_all_schemas(self) -> Registry:
        registry = Registry()

        for entry in self._schema_dir().iterdir():
            if not entry.name.endswith(".json"):
                continue

            schema = json.loads(entry.read_text(encoding="utf-8"))
            registry = registry.with_resource(
                schema["$id"],
                Resource.from_contents(schema),
            )

        return registry

    def _load_validators(self) -> Dict[SchemaName, Draft202012Validator]:
        validators: Dict[SchemaName, Draft202012Validator] = {}

        for name in SchemaName:
            schema = json.loads(
                (self._schema_dir() / f"{name.value}.json").read_text(encoding="utf-8")
            )
            validators[name] = Draft202012Validator(
                schema=schema,
                registry=self._registry,
            )

        return validators

    # ----------------------------
    # Validation
    # ----------------------------

    def validate(self, instance: Any, *, schema: SchemaName = SchemaName.OUTPUT) -> None:
        try:
            validator = self._validators[schema]
        except KeyError:
            raise ProtocolError(f"No schema registered for '{schema.value}'")

        errors = sorted(validator.iter_errors(instance), key=str)
        if errors:
            err = errors[0]
            raise ProtocolError(f"Invalid {schema.value} document: {err.message}")
