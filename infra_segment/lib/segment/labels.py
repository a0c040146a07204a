from typing import Mapping, Optional

from .types import Label


def to_label_list(labels: Optional[Mapping[str, str]]) -> Optional[list[Label]]:
    """
    Convert a tag mapping to a list of key/value pairs

    Pairs are sorted by key so repeated synthesis produces the same list.

    :param labels: Tag mapping, or None when no tags were given
    :return: None if `labels` is None, else a (possibly empty) list of labels
    """
    if labels is None:
        return None
    return [Label(key, value) for key, value in sorted(labels.items())]
