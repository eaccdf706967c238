"""Shape of the cheat sheet document.

The defaults describe the page this project was written against::

    <div id="content">
      <h2>People</h2>
      <ul class="emojis" id="emoji-people">
        <li><div><span class="cheat-icon">...</span><span class="name">smile</span></div></li>
      </ul>
    </div>

Example::

    from emojisheet.common.rules import ExtractionRules

    rules = ExtractionRules(heading_tag="h3")
"""

from pydantic import BaseModel, ConfigDict, field_validator


class ExtractionRules(BaseModel):
    """Tag names, ids and class tokens the extractor matches on.

    Attributes:
        container_tag: Tag of the root container.
        container_id: ``id`` of the root container.
        list_tag: Tag of each group list.
        list_class: Class token marking a group list.
        list_id_attribute: Required identifying attribute of a group list.
        heading_tag: Tag of the heading naming the following list.
        item_tag: Tag of a list item.
        wrapper_tag: Expected tag of a list item's first element child.
        payload_tag: Tag of the element carrying the record name.
        payload_class: Class token marking the payload element.

    Tag names are stored lowercase, the way the node model reports them.
    """

    model_config = ConfigDict(frozen=True)

    container_tag: str = "div"
    container_id: str = "content"
    list_tag: str = "ul"
    list_class: str = "emojis"
    list_id_attribute: str = "id"
    heading_tag: str = "h2"
    item_tag: str = "li"
    wrapper_tag: str = "div"
    payload_tag: str = "span"
    payload_class: str = "name"

    @field_validator(
        "container_tag",
        "list_tag",
        "heading_tag",
        "item_tag",
        "wrapper_tag",
        "payload_tag",
    )
    @classmethod
    def lowercase_tag(cls, v: str) -> str:
        return v.lower()


DEFAULT_RULES = ExtractionRules()
