import regex

CONFUSABLES_FILENAME = "confusables.txt"

ENV_CONFUSABLES_PATH = "UNICODE_SKELETON_CONFUSABLES"

BYTE_ORDER_MARK = "\ufeff"

COMMENT_MARKER = "#"

# <source> ; <target> <target> ... ; <type>
CONFUSABLE_LINE = regex.compile(
    r"\s*(?P<source>\p{AHex}+)\s*;"
    r"\s*(?P<targets>\p{AHex}+(?:\s+\p{AHex}+)*)\s*"
    r"(?:;.*)?"
)
