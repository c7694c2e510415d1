# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""The named, immutable table of type descriptors used to resolve references."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from schemacast.errors import DescriptorTableError, UnknownTypeReference
from schemacast.model.descriptors import (
    ArrayDescriptor,
    Descriptor,
    ObjectDescriptor,
    ReferenceDescriptor,
    UnionDescriptor,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DescriptorTable(Mapping[str, Descriptor]):
    """A read-only mapping from type name to descriptor.

    Every reference reachable from any entry is checked when the table is
    constructed, so :meth:`resolve` can only fail for names asked for by the
    caller directly.
    """

    def __init__(self, descriptors: Mapping[str, Descriptor]) -> None:
        self._descriptors: Mapping[str, Descriptor] = MappingProxyType(dict(descriptors))
        for name, descriptor in self._descriptors.items():
            for reference in _references(descriptor):
                if reference not in self._descriptors:
                    raise UnknownTypeReference(reference, referenced_from=name)
        for name in self._descriptors:
            _check_reference_chain(name, self._descriptors)
        logger.debug("Built descriptor table with %d types", len(self._descriptors))

    def resolve(self, name: str) -> Descriptor:
        """Return the descriptor registered under *name*.

        Raises:
            UnknownTypeReference: If no descriptor is registered under *name*.
        """
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownTypeReference(name) from None

    def __getitem__(self, name: str) -> Descriptor:
        return self._descriptors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"DescriptorTable({sorted(self._descriptors)!r})"


# ################
# Implementation
# ################


def _references(descriptor: Descriptor) -> Iterator[str]:
    """Yield the names of all references nested directly in *descriptor*."""
    if isinstance(descriptor, ReferenceDescriptor):
        yield descriptor.name
    elif isinstance(descriptor, ArrayDescriptor):
        yield from _references(descriptor.items)
    elif isinstance(descriptor, UnionDescriptor):
        for member in descriptor.members:
            yield from _references(member)
    elif isinstance(descriptor, ObjectDescriptor):
        for prop in descriptor.properties:
            yield from _references(prop.type)
        yield from _references(descriptor.additional)


def _check_reference_chain(name: str, descriptors: Mapping[str, Descriptor]) -> None:
    """Reject a name whose descriptor is only references that lead back to themselves."""
    chain = [name]
    descriptor = descriptors[name]
    while isinstance(descriptor, ReferenceDescriptor):
        if descriptor.name in chain:
            cycle = " -> ".join([*chain, descriptor.name])
            raise DescriptorTableError(f"Reference cycle without a concrete descriptor: {cycle}")
        chain.append(descriptor.name)
        descriptor = descriptors[descriptor.name]
