"""
Signature construction for grouping filenames by shape.
"""

from collections.abc import Iterable

from .models import Component, Signature, TypeTag

SIGNATURE_DELIMITER = "|"

_TYPE_TAGS = {
    TypeTag.ALPHA: "WORD",
    TypeTag.NUMERIC: "NUM",
    TypeTag.ALPHANUM: "ALNUM",
    TypeTag.DATE: "DATE",
    TypeTag.EXT: "EXT",
}


class SignatureBuilder:
    """Maps typed components to a canonical shape string."""

    def element_for(self, component: Component) -> str:
        """Get the signature tag of a single component."""
        if component.type is TypeTag.SEP:
            return f"SEP({component.value})"
        return _TYPE_TAGS[component.type]

    def build(self, components: Iterable[Component]) -> Signature:
        """
        Build the signature of a component sequence.

        Args:
            components: Components in position order

        Returns:
            Signature with its elements and canonical join
        """
        elements = tuple(self.element_for(c) for c in components)
        return Signature(elements=elements, canonical=SIGNATURE_DELIMITER.join(elements))
