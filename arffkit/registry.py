"""Class registration and creation from json recipes found in config files."""

from typing import Dict, Any, Callable, Tuple, Union

from arffkit.exceptions import ArffException

def arff_registration(name:str) -> Callable[[type],type]:

    def registration_decorator(cls: type) -> type:
        ArffRegistry.register(name, cls)
        return cls

    return registration_decorator

class ArffRegistry:

    _registry: Dict[str,Callable] = {}

    @classmethod
    def register(cls, name:str, tipe:Callable) -> None:
        if name in cls._registry and cls._registry[name] is not tipe:
            raise ArffException(f"The class `{tipe.__name__}` has already been registered for '{name}'")
        cls._registry[name] = tipe

    @classmethod
    def is_known_recipe(cls, recipe:Any) -> bool:
        if isinstance(recipe, str):
            return recipe in cls._registry
        if isinstance(recipe, dict) and len(recipe) == 1:
            return next(iter(recipe)) in cls._registry
        return False

    @classmethod
    def construct(cls, recipe:Union[str,dict]) -> Any:
        """Construct an object from a recipe.

        Recipes are either a registered name (e.g., "IndentLogger") or a single
        key dict mapping a registered name to its arguments. A list holds several
        arguments, a dict holds keyword arguments unless it is itself a recipe
        and anything else is a single argument (e.g., {"BasicLogger":"Console"}).
        """
        if not cls.is_known_recipe(recipe):
            raise ArffException(f"We were unable to make {recipe}.")

        if isinstance(recipe, str):
            return cls._registry[recipe]()

        name, raw_args = next(iter(recipe.items()))
        args, kwargs   = cls._construct_args(raw_args)

        try:
            return cls._registry[name](*args, **kwargs)
        except TypeError as e:
            raise ArffException(f"We were unable to make {recipe} ({e}).") from e

    @classmethod
    def _construct_args(cls, args:Any) -> Tuple[list,dict]:
        if isinstance(args, dict) and not cls.is_known_recipe(args):
            return [], { k:cls._make_or_return(v) for k,v in args.items() }
        if isinstance(args, list):
            return [ cls._make_or_return(a) for a in args ], {}
        return [ cls._make_or_return(args) ], {}

    @classmethod
    def _make_or_return(cls, item:Any) -> Any:
        return cls.construct(item) if cls.is_known_recipe(item) else item
