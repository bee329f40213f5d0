"""
Named-parameter store for charmff calculations

Physical inputs are addressed by fully-qualified names such as
"D->pi::s_0^+(0)@KKMO2009" or "mass::D_d". The store hands out Parameter
handles: calling a handle returns the value held by the store at call time, so a
caller may change a value between two evaluations and every object holding the
handle sees the new value. Objects that read parameters register the names they
use through ParameterUser, so that a host can list everything an observable
depends on.

Default values are read from the YAML cards in charmff/cards/ with OmegaConf.

Usage:
    from charmff.qcdlib.parameters import Parameters
    p = Parameters.defaults()
    p["D->pi::mu@KKMO2009"] = 2.0
    mu = p["D->pi::mu@KKMO2009"]
    print(mu())
"""

import pathlib

from omegaconf import OmegaConf

#--cards/ sits next to the qcdlib/ package
cards_dir = pathlib.Path(__file__).resolve().parent.parent.joinpath("cards")
default_card = "defaults.yaml"


class UnknownParameterError(KeyError):
    """
    Raised when a parameter name is not present in the store.
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown parameter '{name}'")

    def __str__(self):
        return self.args[0]


class Parameter:
    """
    Handle on one named value of a Parameters store.

    Calling the handle returns the current value.
    """

    __slots__ = ("_store", "name")

    def __init__(self, store, name):
        self._store = store
        self.name = name

    def __call__(self):
        return self._store._values[self.name]

    def evaluate(self):
        return self()

    def set(self, value):
        self._store[self.name] = value

    def __float__(self):
        return float(self())

    def __repr__(self):
        return f"Parameter({self.name!r} = {self()})"


class Parameters:
    """
    String-keyed store of real-valued physical parameters.
    """

    def __init__(self, values=None):
        self._values = {}
        if values is not None:
            for name, value in dict(values).items():
                self._values[str(name)] = float(value)

    @classmethod
    def from_card(cls, card):
        """
        Load a parameter card (YAML) with OmegaConf.

        Args:
            card: file name looked up in charmff/cards/, or a path. The card holds
                  a 'parameters' mapping and optionally 'extends: <card>'

        Returns:
            Parameters instance

        Raises:
            FileNotFoundError: if the card does not exist
            ValueError: if the card has no 'parameters' mapping
        """
        path = pathlib.Path(card)
        if not path.exists():
            path = cards_dir.joinpath(card)
        if not path.exists():
            raise FileNotFoundError(f"Parameter card not found: {card}")

        content = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        if not isinstance(content, dict) or not isinstance(content.get("parameters"), dict):
            raise ValueError(f"Parameter card {path} must contain a 'parameters' mapping")

        #--a card may extend another card and override some of its values
        base = content.get("extends")
        parameters = cls.from_card(base) if base else cls()
        for name, value in content["parameters"].items():
            parameters.declare(name, value)

        return parameters

    @classmethod
    def defaults(cls):
        """
        Parameters of the default card.
        """
        return cls.from_card(default_card)

    def __getitem__(self, name):
        if name not in self._values:
            raise UnknownParameterError(name)
        return Parameter(self, name)

    def __setitem__(self, name, value):
        if name not in self._values:
            raise UnknownParameterError(name)
        self._values[name] = float(value)

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)

    def declare(self, name, value):
        """
        Add a new parameter (or overwrite an existing one).
        """
        self._values[str(name)] = float(value)
        return Parameter(self, name)

    def update(self, values):
        for name, value in dict(values).items():
            self[name] = value

    def names(self):
        return sorted(self._values)

    def as_dict(self):
        return dict(self._values)

    def clone(self):
        """
        Independent copy; handles of the copy do not see changes of the original.
        """
        return Parameters(self._values)


class ParameterUser:
    """
    Bookkeeping of the parameter names an object reads.
    """

    def __init__(self):
        self._used_parameter_names = set()

    def use(self, parameters, name):
        """
        Fetch the handle of 'name' and record it as used.
        """
        handle = parameters[name]
        self._used_parameter_names.add(name)
        return handle

    def uses(self, other):
        """
        Inherit the used names of another ParameterUser.
        """
        self._used_parameter_names |= other._used_parameter_names

    @property
    def used_parameter_names(self):
        return sorted(self._used_parameter_names)
