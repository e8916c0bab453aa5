import configparser
import os

from loguru import logger

from evocgp.functions             import FunctionSet
from evocgp.genotype.mutation     import mutation_types
from evocgp.pool.reproduction     import reproduction_schemes
from evocgp.pool.selection        import selection_schemes
from evocgp.run.fitness           import fitness_functions

class Config:

    # Evolutionary strategies, and the spellings accepted for them
    _STRATEGIES = {'+': '+', 'plus': '+', ',': ',', 'comma': ','}

    # Hook attribute => (table of named hooks, name of the default hook)
    _HOOKS = {
        'mutation_type'      : (mutation_types,       'probabilistic'),
        'fitness_function'   : (fitness_functions,    'supervised_learning'),
        'selection_scheme'   : (selection_schemes,    'pick_highest'),
        'reproduction_scheme': (reproduction_schemes, 'mutate_random_parent'),
    }

    @classmethod
    def _resolve_hook(cls, name, value):
        """
        Turn a hook setting into a callable.

        Parameters:
            name:  The hook attribute (e.g. 'selection_scheme')
            value: A registered hook name, a callable, or None for the default

        Returns:
            The hook callable
        """
        table, default = cls._HOOKS[name]
        if value is None:
            return table[default]
        if callable(value):
            return value
        if value not in table:
            raise ValueError(f"Invalid {name} '{value}', expected one of: {', '.join(table)}")
        return table[value]

    @staticmethod
    def hook_name(hook) -> str:
        """Display name of a hook callable."""
        return getattr(hook, '__name__', repr(hook))

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding the defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting;
                         the chromosome shape must then be set before use (see create()).
        """

        # Defaults, also used for every optional setting missing from the file
        self.num_inputs  = 1
        self.num_nodes   = 1
        self.num_outputs = 1
        self.arity       = 1

        self.mu                    = 1
        self.lambda_               = 4
        self.evolutionary_strategy = '+'
        self.generations           = 10000
        self.update_frequency      = 1000

        self.mutation_type = None
        self.mutation_rate = 0.05

        self.connection_weight_range = 1.0

        self.function_set = None

        self.fitness_function    = None
        self.selection_scheme    = None
        self.reproduction_scheme = None

        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [CHROMOSOME]

        # The number of program inputs.
        self.num_inputs = get_value('CHROMOSOME', 'num_inputs', int)

        # The number of nodes in each chromosome (active or not).
        self.num_nodes = get_value('CHROMOSOME', 'num_nodes', int)

        # The number of program outputs.
        self.num_outputs = get_value('CHROMOSOME', 'num_outputs', int)

        # The number of inputs of every node.
        self.arity = get_value('CHROMOSOME', 'arity', int)

        # [EVOLUTION]

        # The number of parents (mu) and children (lambda) in each generation.
        self.mu      = get_value('EVOLUTION', 'mu',     int, default=self.mu)
        self.lambda_ = get_value('EVOLUTION', 'lambda', int, default=self.lambda_)

        # Which chromosomes compete to become the next parents.
        # Allowed values:
        #   "+" (or "plus")  - parents and children
        #   "," (or "comma") - children only
        self.evolutionary_strategy = get_value('EVOLUTION', 'evolutionary_strategy', str,
                                               default=self.evolutionary_strategy)

        # The number of generations after which to stop the run.
        # The run stops sooner if a chromosome with zero error is found.
        self.generations = get_value('EVOLUTION', 'generations', int, default=self.generations)

        # Progress is reported every 'update_frequency' generations (0 = never).
        self.update_frequency = get_value('EVOLUTION', 'update_frequency', int, default=self.update_frequency)

        # [MUTATION]

        # The mutation operator (see 'mutation.py').
        # Allowed values: "probabilistic", "point", "single"
        self.mutation_type = get_value('MUTATION', 'mutation_type', str, default=None)

        # Per gene mutation probability ("probabilistic"), or the
        # fraction of genes which are mutated ("point").
        self.mutation_rate = get_value('MUTATION', 'mutation_rate', float, default=self.mutation_rate)

        # [CONNECTION]

        # Connection weights are drawn uniformly from [-range, +range].
        self.connection_weight_range = get_value('CONNECTION', 'connection_weight_range', float,
                                                 default=self.connection_weight_range)

        # [FUNCTIONS]

        # Comma separated list of built-in node functions (see 'basic_functions.py').
        self.function_set = get_value('FUNCTIONS', 'function_set', str)

        # [HOOKS]

        # The fitness function, selection scheme and reproduction scheme, by name.
        # "None" selects the default.
        self.fitness_function    = get_value('HOOKS', 'fitness_function',    str, default=None)
        self.selection_scheme    = get_value('HOOKS', 'selection_scheme',    str, default=None)
        self.reproduction_scheme = get_value('HOOKS', 'reproduction_scheme', str, default=None)

    @classmethod
    def create(cls, num_inputs: int, num_nodes: int, num_outputs: int, arity: int, **settings) -> 'Config':
        """
        Create a Config in code, without a configuration file.

        Parameters:
            num_inputs, num_nodes, num_outputs, arity: Shape of the chromosomes
            **settings: Any other Config attribute, e.g. mu=2, function_set="add,sub"

        Returns:
            The new Config object
        """
        config = cls()
        config.num_inputs  = num_inputs
        config.num_nodes   = num_nodes
        config.num_outputs = num_outputs
        config.arity       = arity

        for name, value in settings.items():
            if not hasattr(config, name):
                raise AttributeError(f"Config has no setting '{name}'")
            setattr(config, name, value)

        return config

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate settings and convert them to their working form.

        Invalid evolution settings (mu, lambda, strategy, rates and so on) are
        reported and the previous value is kept. An invalid chromosome shape or
        an unknown hook name raises ValueError. Assigning a comma separated string
        to 'function_set' builds a FunctionSet; assigning a hook name selects the
        registered hook.
        """
        if name in ('num_inputs', 'num_outputs', 'arity'):
            if value is None or value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")

        elif name == 'num_nodes':
            if value is None or value < 0:
                raise ValueError(f"num_nodes cannot be negative, got {value}")

        elif name in ('mu', 'lambda_', 'generations'):
            if value is None or value < 1:
                self._reject(name, value, "must have a value of one or greater")
                return

        elif name == 'evolutionary_strategy':
            if value not in self._STRATEGIES:
                self._reject(name, value, "must be '+' (plus) or ',' (comma)")
                return
            value = self._STRATEGIES[value]

        elif name == 'mutation_rate':
            if value is None or not 0 <= value <= 1:
                self._reject(name, value, "must be in the range [0,1]")
                return

        elif name == 'connection_weight_range':
            if value is None or value <= 0:
                self._reject(name, value, "must be greater than zero")
                return

        elif name == 'update_frequency':
            if value is None or value < 0:
                self._reject(name, value, "must be zero or greater")
                return

        elif name == 'function_set':
            if value is None or isinstance(value, str):
                value = FunctionSet(value)

        elif name in self._HOOKS:
            value = self._resolve_hook(name, value)

        super().__setattr__(name, value)

    def _reject(self, name, value, requirement):
        logger.warning("{} value '{}' is invalid: {} {}. Left unchanged as '{}'.",
                       name, value, name, requirement, getattr(self, name, None))

    def __str__(self):
        lines = ["-----------------------------------",
                 "            Parameters             ",
                 "-----------------------------------",
                 f"Evolutionary Strategy:\t\t(mu{self.evolutionary_strategy}lambda)-ES",
                 f"mu:\t\t\t\t{self.mu}",
                 f"lambda:\t\t\t\t{self.lambda_}",
                 f"Mutation Type:\t\t\t{self.hook_name(self.mutation_type)}",
                 f"Mutation rate:\t\t\t{self.mutation_rate:f}",
                 f"Connection weights range:\t+/- {self.connection_weight_range:f}",
                 f"Inputs:\t\t\t\t{self.num_inputs}",
                 f"Nodes:\t\t\t\t{self.num_nodes}",
                 f"Outputs:\t\t\t{self.num_outputs}",
                 f"Node Arity:\t\t\t{self.arity}",
                 str(self.function_set),
                 f"Fitness Function:\t\t{self.hook_name(self.fitness_function)}",
                 f"Selection scheme:\t\t{self.hook_name(self.selection_scheme)}",
                 f"Reproduction scheme:\t\t{self.hook_name(self.reproduction_scheme)}",
                 "-----------------------------------"]
        return '\n'.join(lines)
