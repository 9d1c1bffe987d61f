"""Rule identity and fixed Swift/SourceKit vocabulary used by the type name rule."""

RULE_IDENTIFIER = "type_name"
RULE_NAME = "Type Name"
RULE_DESCRIPTION = (
    "Type name should only contain alphanumeric characters, start with an "
    "uppercase character and span between 3 and 40 characters in length."
)

TOOL_SECTION = "type-name"
BANNER = "[TYPE-NAME] Swift type name audit"

# SwiftUI marker protocol whose conformers get the `_Previews` suffix exempted.
PREVIEW_PROVIDER = "PreviewProvider"
PREVIEW_SUFFIX = "_Previews"

ALIAS_KEYWORDS = ("typealias", "associatedtype")
ALIAS_PATTERN = r"(typealias|associatedtype)\s+.+?\b"

SOURCEKIT_DECL_PREFIX = "source.lang.swift.decl."
SOURCEKIT_ACCESSIBILITY_PREFIX = "source.lang.swift.accessibility."
SOURCEKIT_SYNTAX_PREFIX = "source.lang.swift.syntaxtype."
