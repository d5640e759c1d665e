"""Turn the text of a doc comment into summary, description and tags."""

from tagdoc.extracted_tags import ExtractedTags
from tagdoc.parse_tags import parse_tags
from tagdoc.split_summary import split_summary
from tagdoc.tag_registry import TAG_TYPE, TagRegistry


def extract_tags(text: str, registry: TagRegistry) -> ExtractedTags:
    """Extract tags from a doc comment.

    A tag that appears more than once gets a list of values in source order;
    a single occurrence keeps a plain string.
    """
    if not text.strip():
        return ExtractedTags()
    preamble, tag_items = parse_tags(text)
    summary, description = split_summary(preamble)
    result = ExtractedTags(summary=summary, description=description)
    tags = result.tags
    for raw_tag, raw_value in tag_items:
        is_type_tag = registry.tag_type(registry.canonical(raw_tag)) == TAG_TYPE
        tag = registry.check_tag(tags, raw_tag)
        value = raw_value.strip()
        if is_type_tag:
            # @function foo: only the first word names the item
            value = value.split(None, 1)[0] if value else ""
        old_value = tags.get(tag)
        if old_value is None:
            tags[tag] = value
        elif isinstance(old_value, list):
            old_value.append(value)
        else:
            tags[tag] = [old_value, value]
    return result
