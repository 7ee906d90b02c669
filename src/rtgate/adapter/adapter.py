"""CapabilityAdapter -- toggle a resource's activation flag across API shapes.

The external collection is versioned independently of this package, so no
particular method signature is assumed.  Each decision point is an ordered
list of :class:`~rtgate.adapter.probes.Probe` objects and the first shape the
collection actually exposes wins:

1. **constructor** -- ``factory(location, logger=...)``, then ``factory(location)``.
2. **lookup** -- ``get_resource(name, include_inactive)``, then ``get_resource(name)``.
3. **apply** -- collection-level ``deactivate_resource(handle)`` /
   ``activate_resource(handle)``, then ``handle.set_active(flag)``, then
   assignment of ``handle.active``.

Persistence (``write()``) is attempted once.  A failed write keeps the
in-memory change and reports ``APPLIED_NOT_PERSISTED``.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Callable

from rtgate.adapter.models import (
    ActivationStatus,
    ErrorKind,
    NegotiationOutcome,
    OutcomeKind,
    ShapeNames,
)
from rtgate.adapter.probes import Probe, accepts, first_available, has_field, method
from rtgate.errors import (
    NegotiationError,
    PersistenceError,
    ResourceNotFoundError,
    StructuralIncompatibilityError,
)
from rtgate.utils.telemetry import (
    ATTR_DESIRED_ACTIVE,
    ATTR_ERROR_KIND,
    ATTR_OUTCOME,
    ATTR_RESOURCE,
    get_tracer,
    record_shapes,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

CollectionFactory = Callable[..., Any]

LOCATION_UNDETERMINABLE = "location undeterminable"


class CapabilityAdapter:
    """Negotiate activation state with a dynamically located collection.

    *factory* is the collection type (or any callable building one), or an
    import path ``"package.module:Attribute"`` resolved on every call.
    """

    def __init__(
        self,
        factory: CollectionFactory | str,
        *,
        shapes: ShapeNames | None = None,
        collection_logger: logging.Logger | None = None,
    ) -> None:
        self._factory = factory
        self._names = shapes or ShapeNames()
        self._collection_logger = collection_logger or logger

    @property
    def shape_names(self) -> ShapeNames:
        return self._names

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def negotiate_activation(
        self,
        resource_name: str,
        desired_active: bool,
        collection_location: str | Path | None,
    ) -> NegotiationOutcome:
        """Apply *desired_active* to *resource_name* and persist it."""
        with _tracer.start_as_current_span("rtgate.negotiate") as span:
            span.set_attribute(ATTR_RESOURCE, resource_name)
            span.set_attribute(ATTR_DESIRED_ACTIVE, desired_active)
            outcome = self._negotiate(resource_name, desired_active, collection_location)
            span.set_attribute(ATTR_OUTCOME, outcome.kind.value)
            if outcome.error is not None:
                span.set_attribute(ATTR_ERROR_KIND, outcome.error.value)
            record_shapes(span, outcome.shapes)
            return outcome

    def query_is_active(
        self,
        resource_name: str,
        collection_location: str | Path | None,
    ) -> ActivationStatus:
        """Report whether *resource_name* is active.

        Fails open: if the state cannot be determined for any reason the
        resource is reported as active.
        """
        shapes: dict[str, str] = {}
        location = _as_location(collection_location)
        if location is None:
            return ActivationStatus.fail_open(
                resource_name, OutcomeKind.FAILED, LOCATION_UNDETERMINABLE
            )
        try:
            collection = self._open(location, shapes)
            handle = self._lookup(collection, resource_name, True, shapes)
            active = self._read_state(handle)
        except ResourceNotFoundError as exc:
            logger.debug("Cannot read state of %s: %s", resource_name, exc)
            return ActivationStatus.fail_open(
                resource_name, OutcomeKind.RESOURCE_NOT_FOUND, str(exc), shapes
            )
        except Exception as exc:
            logger.debug("Cannot read state of %s", resource_name, exc_info=True)
            return ActivationStatus.fail_open(
                resource_name, OutcomeKind.FAILED, _describe(exc), shapes
            )

        return ActivationStatus(resource=resource_name, active=active, shapes=shapes)

    # ------------------------------------------------------------------
    # Negotiation steps
    # ------------------------------------------------------------------

    def _negotiate(
        self,
        resource_name: str,
        desired_active: bool,
        collection_location: str | Path | None,
    ) -> NegotiationOutcome:
        shapes: dict[str, str] = {}
        location = _as_location(collection_location)
        if location is None:
            return NegotiationOutcome.failed(
                resource_name,
                LOCATION_UNDETERMINABLE,
                error=ErrorKind.LOCATION_UNDETERMINABLE,
                desired_active=desired_active,
            )

        try:
            collection = self._open(location, shapes)
            # Some collections only return active entries by default.
            handle = self._lookup(collection, resource_name, desired_active, shapes)
            self._apply(collection, handle, desired_active, shapes)
        except ResourceNotFoundError:
            logger.info("Resource %s not found in collection", resource_name)
            return NegotiationOutcome(
                kind=OutcomeKind.RESOURCE_NOT_FOUND,
                resource=resource_name,
                desired_active=desired_active,
                reason=f"The {resource_name} resource was not found in your installation.",
                shapes=shapes,
            )
        except StructuralIncompatibilityError as exc:
            logger.warning("Collection API is incompatible: %s", exc)
            return NegotiationOutcome.failed(
                resource_name,
                str(exc),
                error=ErrorKind.STRUCTURAL_INCOMPATIBILITY,
                desired_active=desired_active,
                shapes=shapes,
            )
        except Exception as exc:
            logger.warning("Failed to change activation of %s", resource_name, exc_info=True)
            return NegotiationOutcome.failed(
                resource_name,
                _describe(exc),
                desired_active=desired_active,
                shapes=shapes,
            )

        try:
            self._persist(collection)
        except PersistenceError as exc:
            logger.debug("Could not persist collection (read-only storage?): %s", exc)
            return NegotiationOutcome(
                kind=OutcomeKind.APPLIED_NOT_PERSISTED,
                resource=resource_name,
                desired_active=desired_active,
                reason=str(exc),
                error=ErrorKind.PERSISTENCE,
                shapes=shapes,
            )

        logger.info(
            "Resource %s has been %s",
            resource_name,
            "activated" if desired_active else "deactivated",
        )
        return NegotiationOutcome(
            kind=OutcomeKind.APPLIED,
            resource=resource_name,
            desired_active=desired_active,
            shapes=shapes,
        )

    def _open(self, location: Path, shapes: dict[str, str]) -> Any:
        """Instantiate the collection and load its contents."""
        factory = self._resolve_factory()
        log = self._collection_logger
        probe = first_available(
            "constructor",
            [
                Probe(
                    "location+logger",
                    lambda: accepts(factory, location, logger=log),
                    lambda: factory(location, logger=log),
                ),
                Probe(
                    "location",
                    lambda: accepts(factory, location),
                    lambda: factory(location),
                ),
            ],
        )
        collection = probe.invoke()
        shapes["constructor"] = probe.name

        read = method(collection, self._names.read)
        if read is None:
            raise StructuralIncompatibilityError("read", [self._names.read])
        read()
        return collection

    def _lookup(
        self,
        collection: Any,
        name: str,
        include_inactive: bool,
        shapes: dict[str, str],
    ) -> Any:
        """Resolve *name* to a resource handle."""
        lookup = method(collection, self._names.lookup)
        probe = first_available(
            "lookup",
            [
                Probe(
                    "name+include_inactive",
                    lambda: accepts(lookup, name, include_inactive),
                    lambda: lookup(name, include_inactive),
                ),
                Probe(
                    "name",
                    lambda: accepts(lookup, name),
                    lambda: lookup(name),
                ),
            ],
        )
        handle = probe.invoke()
        shapes["lookup"] = probe.name
        if handle is None:
            raise ResourceNotFoundError(name)
        return handle

    def _apply(
        self,
        collection: Any,
        handle: Any,
        desired_active: bool,
        shapes: dict[str, str],
    ) -> None:
        """Set the activation flag through the first available shape."""
        names = self._names
        toggle = method(collection, names.activate if desired_active else names.deactivate)
        setter = method(handle, names.set_active)
        probe = first_available(
            "apply",
            [
                Probe(
                    "collection_setter",
                    lambda: accepts(toggle, handle),
                    lambda: toggle(handle),
                ),
                Probe(
                    "resource_setter",
                    lambda: accepts(setter, desired_active),
                    lambda: setter(desired_active),
                ),
                Probe(
                    "attribute",
                    lambda: has_field(handle, names.attribute),
                    lambda: setattr(handle, names.attribute, desired_active),
                ),
            ],
        )
        probe.invoke()
        shapes["apply"] = probe.name
        self._verify(handle, desired_active)

    def _verify(self, handle: Any, desired_active: bool) -> None:
        """Ensure the handle reflects the change before anything is written."""
        try:
            current = self._read_state(handle)
        except StructuralIncompatibilityError:
            return
        if current != desired_active:
            raise NegotiationError("activation change did not take effect")

    def _read_state(self, handle: Any) -> bool:
        names = self._names
        getter = method(handle, names.is_active)
        probe = first_available(
            "state",
            [
                Probe("resource_getter", lambda: accepts(getter), lambda: getter()),
                Probe(
                    "attribute",
                    lambda: has_field(handle, names.attribute),
                    lambda: getattr(handle, names.attribute),
                ),
            ],
        )
        return bool(probe.invoke())

    def _persist(self, collection: Any) -> None:
        write = method(collection, self._names.write)
        if write is None:
            raise PersistenceError(f"collection has no '{self._names.write}' method")
        try:
            write()
        except Exception as exc:
            raise PersistenceError(_describe(exc)) from exc

    def _resolve_factory(self) -> CollectionFactory:
        if not isinstance(self._factory, str):
            return self._factory
        return load_factory(self._factory)


def load_factory(path: str) -> CollectionFactory:
    """Import ``"package.module:Attribute"`` and return the attribute.

    Raises:
        NegotiationError: If the module or attribute cannot be found.
    """
    module_name, _, attr = path.partition(":")
    if not module_name or not attr:
        raise NegotiationError(f"invalid collection factory path '{path}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise NegotiationError(f"cannot import '{module_name}': {exc}") from exc
    try:
        factory = getattr(module, attr)
    except AttributeError as exc:
        raise NegotiationError(f"'{module_name}' has no attribute '{attr}'") from exc
    if not callable(factory):
        raise NegotiationError(f"'{path}' is not callable")
    return factory


def _as_location(collection_location: str | Path | None) -> Path | None:
    """Return the location as a :class:`Path`, or ``None`` when it is empty.

    ``Path("")`` normalises to ``Path(".")``, so a path without parts counts
    as empty too.
    """
    if not collection_location:
        return None
    location = Path(collection_location)
    if isinstance(collection_location, Path) and not location.parts:
        return None
    return location


def _describe(exc: BaseException) -> str:
    """Render *exc* as ``Type: message`` for display."""
    message = str(exc)
    return type(exc).__name__ + (f": {message}" if message else "")
