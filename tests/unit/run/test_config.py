"""
Unit tests for Config class.
"""

import configparser
import os

import pytest

from evocgp.functions         import FunctionSet
from evocgp.genotype.mutation import point_mutation, probabilistic_mutation
from evocgp.pool              import mutate_random_parent, pick_highest
from evocgp.run.config        import Config
from evocgp.run.fitness       import supervised_learning


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_config_dir():
    """Return the directory containing test configuration files."""
    return os.path.join(os.path.dirname(__file__), 'test_configs')


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_holds_defaults(self):
        config = Config()

        assert config.mu == 1
        assert config.lambda_ == 4
        assert config.evolutionary_strategy == '+'
        assert config.mutation_rate == 0.05
        assert config.connection_weight_range == 1.0
        assert config.generations == 10000
        assert config.update_frequency == 1000
        assert len(config.function_set) == 0

    def test_default_hooks(self):
        config = Config()

        assert config.mutation_type is probabilistic_mutation
        assert config.fitness_function is supervised_learning
        assert config.selection_scheme is pick_highest
        assert config.reproduction_scheme is mutate_random_parent

    def test_init_with_nonexistent_file_raises_error(self):
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_missing_chromosome_section_raises(self, test_config_dir):
        with pytest.raises(configparser.NoSectionError):
            Config(os.path.join(test_config_dir, 'missing_chromosome.ini'))


# ============================================================================
# Test Config Files
# ============================================================================

class TestConfigMinimalFile:
    """Settings missing from the file take their default values."""

    @pytest.fixture
    def config(self, test_config_dir):
        return Config(os.path.join(test_config_dir, 'minimal.ini'))

    def test_chromosome_shape(self, config):
        assert (config.num_inputs, config.num_nodes, config.num_outputs, config.arity) == (2, 15, 1, 2)

    def test_function_set(self, config):
        assert isinstance(config.function_set, FunctionSet)
        assert config.function_set.names == ['add', 'sub', 'mul', 'div']

    def test_defaults(self, config):
        assert config.mu == 1
        assert config.lambda_ == 4
        assert config.evolutionary_strategy == '+'
        assert config.generations == 10000
        assert config.mutation_type is probabilistic_mutation
        assert config.selection_scheme is pick_highest


class TestConfigFullFile:

    @pytest.fixture
    def config(self, test_config_dir):
        return Config(os.path.join(test_config_dir, 'full.ini'))

    def test_chromosome_shape(self, config):
        assert (config.num_inputs, config.num_nodes, config.num_outputs, config.arity) == (3, 50, 2, 3)

    def test_evolution(self, config):
        assert config.mu == 2
        assert config.lambda_ == 8
        assert config.evolutionary_strategy == ','
        assert config.generations == 500
        assert config.update_frequency == 0

    def test_mutation(self, config):
        assert config.mutation_type is point_mutation
        assert config.mutation_rate == 0.1

    def test_connection_weight_range(self, config):
        assert config.connection_weight_range == 2.5

    def test_function_set(self, config):
        assert config.function_set.names == ['and', 'or', 'nand', 'nor', 'xor']

    def test_hooks(self, config):
        assert config.fitness_function is supervised_learning
        assert config.selection_scheme is pick_highest     # "None" selects the default
        assert config.reproduction_scheme is mutate_random_parent


class TestConfigInvalidFile:

    def test_invalid_values_keep_defaults(self, test_config_dir, log_messages):
        config = Config(os.path.join(test_config_dir, 'invalid_values.ini'))

        assert config.mu == 1
        assert config.lambda_ == 4
        assert config.evolutionary_strategy == '+'
        assert config.generations == 10000
        assert config.update_frequency == 1000
        assert config.mutation_rate == 0.05
        assert config.connection_weight_range == 1.0
        assert config.function_set.names == ['add']
        assert len(log_messages) == 8

    def test_unknown_hook_raises(self, test_config_dir):
        with pytest.raises(ValueError, match="tournament"):
            Config(os.path.join(test_config_dir, 'unknown_hook.ini'))


# ============================================================================
# Test Config Attribute Validation
# ============================================================================

class TestConfigSetattr:

    def test_invalid_mu_is_ignored(self, log_messages):
        config = Config()
        config.mu = 3
        config.mu = 0

        assert config.mu == 3
        assert any("mu value '0' is invalid" in message for message in log_messages)

    @pytest.mark.parametrize("name,value", [
        ('lambda_', 0),
        ('generations', -5),
        ('mutation_rate', -0.1),
        ('mutation_rate', 1.01),
        ('connection_weight_range', 0.0),
        ('update_frequency', -1),
        ('evolutionary_strategy', '*'),
    ])
    def test_invalid_values_are_ignored(self, name, value, log_messages):
        config = Config()
        before = getattr(config, name)

        setattr(config, name, value)

        assert getattr(config, name) == before
        assert len(log_messages) == 1

    @pytest.mark.parametrize("value,expected", [('+', '+'), ('plus', '+'), (',', ','), ('comma', ',')])
    def test_strategy_spellings(self, value, expected):
        config = Config()
        config.evolutionary_strategy = value

        assert config.evolutionary_strategy == expected

    def test_mutation_rate_bounds_are_valid(self):
        config = Config()
        config.mutation_rate = 0.0
        assert config.mutation_rate == 0.0
        config.mutation_rate = 1.0
        assert config.mutation_rate == 1.0

    @pytest.mark.parametrize("name,value", [('num_inputs', 0), ('num_outputs', 0), ('arity', 0), ('num_nodes', -1)])
    def test_invalid_shape_raises(self, name, value):
        config = Config()

        with pytest.raises(ValueError):
            setattr(config, name, value)

    def test_function_set_from_string(self):
        config = Config()
        config.function_set = "add, mul"

        assert config.function_set.names == ['add', 'mul']

    def test_function_set_object_is_kept(self):
        function_set = FunctionSet("xor")
        config = Config()
        config.function_set = function_set

        assert config.function_set is function_set

    def test_hook_by_name(self):
        config = Config()
        config.mutation_type = "point"

        assert config.mutation_type is point_mutation

    def test_hook_callable(self):
        def my_selection(config, parents, candidates):
            pass

        config = Config()
        config.selection_scheme = my_selection

        assert config.selection_scheme is my_selection

    def test_hook_none_restores_default(self):
        config = Config()
        config.mutation_type = "point"
        config.mutation_type = None

        assert config.mutation_type is probabilistic_mutation

    def test_unknown_hook_name_raises(self):
        config = Config()

        with pytest.raises(ValueError):
            config.reproduction_scheme = "crossover"


# ============================================================================
# Test Config.create
# ============================================================================

class TestConfigCreate:

    def test_shape_and_settings(self):
        config = Config.create(4, 20, 2, 3, mu=2, lambda_=6, function_set="add,sub")

        assert (config.num_inputs, config.num_nodes, config.num_outputs, config.arity) == (4, 20, 2, 3)
        assert config.mu == 2
        assert config.lambda_ == 6
        assert config.function_set.names == ['add', 'sub']

    def test_unknown_setting_raises(self):
        with pytest.raises(AttributeError):
            Config.create(1, 1, 1, 1, population_size=10)

    def test_str(self):
        config = Config.create(2, 10, 1, 2, function_set="add")
        text = str(config)

        assert "(mu+lambda)-ES" in text
        assert "Functions (1): add" in text
        assert "probabilistic_mutation" in text
