"""Name normalization applied before validation."""

from type_name_linter.domain.constants import PREVIEW_PROVIDER, PREVIEW_SUFFIX
from type_name_linter.domain.entities import DeclarationSite


class NameNormalizer:
    """
    Strips generated-name decorations that should not count against a type name.

    Two transforms, always in this order:
    1. a private/fileprivate declaration loses one leading underscore;
    2. a PreviewProvider conformer loses its trailing `_Previews` suffix.
    Names discovered without a declaration (typealias scanner) pass through unchanged.
    """

    def normalize(self, name: str, declaration: DeclarationSite | None) -> str:
        if declaration is None:
            return name
        name = self.strip_leading_underscore_if_private(name, declaration)
        return self.strip_preview_suffix(name, declaration)

    @staticmethod
    def strip_leading_underscore_if_private(name: str, declaration: DeclarationSite) -> str:
        if declaration.accessibility.is_private and name.startswith("_"):
            return name[1:]
        return name

    @staticmethod
    def strip_preview_suffix(name: str, declaration: DeclarationSite) -> str:
        if PREVIEW_PROVIDER in declaration.inherited_types and name.endswith(PREVIEW_SUFFIX):
            return name[: name.index(PREVIEW_SUFFIX)]
        return name
