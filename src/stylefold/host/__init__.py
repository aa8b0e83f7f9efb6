from stylefold.host.rewrite import NotAStyledTemplateError, RewrittenCall, rewrite_tagged
from stylefold.host.tags import TagKind, classify_tag, is_styled_tag

__all__ = [
    "NotAStyledTemplateError",
    "RewrittenCall",
    "TagKind",
    "classify_tag",
    "is_styled_tag",
    "rewrite_tagged",
]
