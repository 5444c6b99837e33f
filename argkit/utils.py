from typing import TypeVar, cast, Optional, Union

T = TypeVar("T")


def uniq(l: list[str]) -> list[str]:
    result: list[str] = []
    for i in l:
        if i not in result:
            result.append(i)
    return result


def asList(i: Optional[Union[T, list[T], tuple[T, ...]]]) -> list[T]:
    if i is None:
        return []
    if isinstance(i, (list, tuple)):
        return cast(list[T], list(i))
    return [i]
