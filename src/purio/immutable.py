from dataclasses import dataclass


class Immutable:
    """
    Super class that turns subclasses into frozen dataclasses.
    Effect descriptions are built from these so that a tree can never
    be modified after it has been constructed

    Example:
        >>> class Greeting(Immutable):
        ...     text: str
        >>> g = Greeting('hello')
        >>> g.text = 'bye'
        dataclasses.FrozenInstanceError: cannot assign to field 'text'

    """
    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False,
                          unsafe_hash: bool = False) -> None:
        super().__init_subclass__()
        dataclass(
            frozen=True,
            init=init,
            repr=repr,
            eq=eq,
            order=order,
            unsafe_hash=unsafe_hash
        )(cls)


__all__ = ['Immutable']
