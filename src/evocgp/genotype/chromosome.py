"""
CGP Chromosome Module

This module implements the Chromosome class for Cartesian Genetic Programming.

Classes:
    Chromosome: Complete genotype of a CGP program
"""

import json
from typing import TYPE_CHECKING, Sequence

from evocgp.exceptions            import EmptyFunctionSetError, IncompatibleChromosomeError
from evocgp.genotype.node_gene    import NodeGene
from evocgp.genotype.random_genes import random_output_gene
from evocgp.phenotype.decoder     import set_active_nodes
from evocgp.phenotype.program     import Program

if TYPE_CHECKING:
    from evocgp.data.dataset       import Dataset
    from evocgp.functions          import FunctionSet
    from evocgp.run.config         import Config

class Chromosome:
    """
    A CGP chromosome: a fixed number of nodes plus one output gene per program output.

    Nodes are laid out in a single row. Each node reads 'arity' values, addressed
    in a flat address space shared by primary inputs and nodes:
        - Primary inputs: [0, num_inputs)
        - Node outputs:   [num_inputs, num_inputs + num_nodes)
    A node at position 'p' may only address values below 'num_inputs + p', so the
    graph is acyclic by construction and nodes can always be evaluated in
    ascending order. Output genes may address any input or node.

    Only the nodes reachable from the output genes (the 'active' nodes) take part
    in execution. The list of active nodes is derived from the genes and must be
    refreshed with set_active_nodes() whenever the genes change.

    Public Attributes:
        nodes:         List of NodeGene objects, in position order
        output_genes:  List of addresses, one per program output
        active_nodes:  Ascending positions of the active nodes
        fitness:       Error score, lower is better (None until evaluated)
        output_values: Program outputs computed during the last execution

    Public Properties:
        num_inputs, num_nodes, num_outputs, arity: Shape of the chromosome
        num_active_nodes:                          Number of active nodes
        function_set:                              The configured function set

    Public Methods:
        is_compatible(other): Whether 'other' has the same shape
        copy_from(other):     Overwrite this chromosome with a copy of 'other'
        clone():              Create an independent copy of this chromosome
        set_active_nodes():   Recompute the active nodes
        execute(inputs):      Run the program on one set of inputs
        mutate():             Apply the configured mutation operator
        set_fitness(dataset): Decode and score the chromosome
        to_dict():            Convert chromosome to dictionary representation
        save(path):           Write the chromosome to a JSON file

    Class Methods:
        from_dict(chromosome_dict, config): Create a chromosome from a dictionary
        load(path, config):                 Read a chromosome from a JSON file
    """

    def __init__(self, config: 'Config'):
        """
        Initialize a random chromosome.
        The shape of the chromosome is retrieved from the Config object.

        Parameters:
            config: Stores configuration parameters

        Raises:
            EmptyFunctionSetError: If the configured function set is empty
        """
        if len(config.function_set) < 1:
            raise EmptyFunctionSetError("chromosome not initialised due to empty function set")

        self._config = config
        self._set_shape(config.num_inputs, config.num_nodes, config.num_outputs, config.arity)

        self.nodes       : list[NodeGene] = [NodeGene(position, config) for position in range(self._num_nodes)]
        self.output_genes: list[int]      = [random_output_gene(config) for _ in range(self._num_outputs)]

        self.active_nodes : list[int]    = []
        self.fitness      : float | None = None
        self.output_values: list[float]  = [0.0] * self._num_outputs

        self.set_active_nodes()

    def _set_shape(self, num_inputs: int, num_nodes: int, num_outputs: int, arity: int) -> None:
        self._num_inputs  = num_inputs
        self._num_nodes   = num_nodes
        self._num_outputs = num_outputs
        self._arity       = arity

    @classmethod
    def from_dict(cls, chromosome_dict: dict, config: 'Config') -> 'Chromosome':
        """
        Create a Chromosome from a dictionary description.

        Function genes are given by name and resolved against the function set
        in 'config'. The shape of the chromosome must match the configuration.

        Dictionary format:
            {
                "num_inputs" : 2,
                "num_nodes"  : 2,
                "num_outputs": 1,
                "arity"      : 2,
                "nodes": [
                    {"function": "add", "connections": [0, 1], "weights": [0.5, -0.2]},
                    {"function": "mul", "connections": [2, 0], "weights": [1.0,  0.3]}
                ],
                "outputs": [3],
                "fitness": 0.25          # optional
            }

        Parameters:
            chromosome_dict: Dictionary describing the chromosome
            config:          Configuration the chromosome must conform to

        Returns:
            A new Chromosome object with the specified genes

        Raises:
            ValueError:           If the shape does not match the configuration, or a
                                  connection/output gene is out of range
            UnknownFunctionError: If a function name is not in the function set
            KeyError:             If required fields are missing from the dictionary
        """
        shape = {name: chromosome_dict[name] for name in ("num_inputs", "num_nodes", "num_outputs", "arity")}
        for name, value in shape.items():
            if value != getattr(config, name):
                raise ValueError(f"chromosome {name}={value} does not match the configuration ({getattr(config, name)})")

        nodes_data   = chromosome_dict["nodes"]
        outputs_data = chromosome_dict["outputs"]
        if len(nodes_data) != config.num_nodes:
            raise ValueError(f"Expected {config.num_nodes} nodes, got {len(nodes_data)}")
        if len(outputs_data) != config.num_outputs:
            raise ValueError(f"Expected {config.num_outputs} outputs, got {len(outputs_data)}")

        chromosome = cls.__new__(cls)
        chromosome._config = config
        chromosome._set_shape(config.num_inputs, config.num_nodes, config.num_outputs, config.arity)

        chromosome.nodes = []
        for position, node_data in enumerate(nodes_data):
            connections = node_data["connections"]
            weights     = node_data.get("weights", [0.0] * config.arity)
            if len(connections) != config.arity or len(weights) != config.arity:
                raise ValueError(f"Node {position} must have {config.arity} connections and weights")

            # Validate that the node only reads from inputs or earlier nodes
            for address in connections:
                if not 0 <= address < config.num_inputs + position:
                    raise ValueError(f"Node {position} cannot connect to address {address}")

            function = config.function_set.index(node_data["function"])
            chromosome.nodes.append(NodeGene(position, config, function, connections, weights))

        for address in outputs_data:
            if not 0 <= address < config.num_inputs + config.num_nodes:
                raise ValueError(f"Output gene {address} is out of range")
        chromosome.output_genes = list(outputs_data)

        chromosome.active_nodes  = []
        chromosome.fitness       = chromosome_dict.get("fitness")
        chromosome.output_values = [0.0] * config.num_outputs
        chromosome.set_active_nodes()

        return chromosome

    def to_dict(self) -> dict:
        """
        Convert the chromosome to a dictionary representation.

        This is the inverse operation of from_dict(), producing
        a dictionary that can be used to reconstruct the chromosome.
        """
        nodes = []
        for node in self.nodes:
            nodes.append({
                "function"   : self.function_set.name(node.function),
                "connections": list(node.connections),
                "weights"    : list(node.weights)
            })

        result = {
            "num_inputs" : self._num_inputs,
            "num_nodes"  : self._num_nodes,
            "num_outputs": self._num_outputs,
            "arity"      : self._arity,
            "nodes"      : nodes,
            "outputs"    : list(self.output_genes)
        }
        if self.fitness is not None:
            result["fitness"] = self.fitness

        return result

    def save(self, path: str) -> None:
        """Write the chromosome to 'path' as JSON."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str, config: 'Config') -> 'Chromosome':
        """Read a chromosome written by save()."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f), config)

    @property
    def num_inputs(self) -> int:
        return self._num_inputs

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def num_outputs(self) -> int:
        return self._num_outputs

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def num_active_nodes(self) -> int:
        return len(self.active_nodes)

    @property
    def function_set(self) -> 'FunctionSet':
        return self._config.function_set

    def is_compatible(self, other: 'Chromosome') -> bool:
        """
        Whether 'other' has the same number of inputs, nodes, outputs and the same arity.
        """
        return (self._num_inputs  == other._num_inputs  and
                self._num_nodes   == other._num_nodes   and
                self._num_outputs == other._num_outputs and
                self._arity       == other._arity)

    def copy_from(self, other: 'Chromosome') -> None:
        """
        Overwrite this chromosome with the genes, active nodes and fitness of 'other'.

        The copy is made in place: the node objects and gene lists of this
        chromosome are reused, nothing new is allocated.

        Parameters:
            other: The chromosome to copy

        Raises:
            IncompatibleChromosomeError: If the two chromosomes have different shapes
        """
        if not self.is_compatible(other):
            raise IncompatibleChromosomeError("cannot copy between chromosomes of different shapes")

        for node_dest, node_src in zip(self.nodes, other.nodes):
            node_dest.copy_from(node_src)

        self.output_genes[:] = other.output_genes
        self.active_nodes[:] = other.active_nodes
        self.fitness         = other.fitness

    def clone(self) -> 'Chromosome':
        """
        Create a new Chromosome with the same genes, active nodes and fitness as this one.
        """
        clone = Chromosome.__new__(Chromosome)
        clone._config = self._config
        clone._set_shape(self._num_inputs, self._num_nodes, self._num_outputs, self._arity)

        clone.nodes = []
        for position, node in enumerate(self.nodes):
            node_copy = NodeGene(position, self._config, node.function, node.connections, node.weights)
            node_copy.active = node.active
            clone.nodes.append(node_copy)

        clone.output_genes  = list(self.output_genes)
        clone.active_nodes  = list(self.active_nodes)
        clone.fitness       = self.fitness
        clone.output_values = [0.0] * self._num_outputs

        return clone

    def set_active_nodes(self) -> list[int]:
        """
        Recompute which nodes are active. See 'evocgp.phenotype.decoder'.

        Returns:
            The ascending positions of the active nodes
        """
        return set_active_nodes(self)

    def execute(self, inputs: Sequence[float]) -> list[float]:
        """
        Run the program encoded by this chromosome on one set of inputs.

        The current list of active nodes is used as is; call set_active_nodes()
        first if the genes have changed since it was last computed.

        Parameters:
            inputs: The program inputs (as many as 'num_inputs')

        Returns:
            The program outputs (as many as 'num_outputs')
        """
        return Program(self, decode=False).forward_pass(inputs)

    def mutate(self) -> None:
        """
        Apply the mutation operator selected in the configuration (in place).
        """
        self._config.mutation_type(self._config, self)

    def set_fitness(self, dataset: 'Dataset | None' = None) -> float:
        """
        Refresh the active nodes and score the chromosome with the configured fitness function.

        Parameters:
            dataset: The data handed to the fitness function

        Returns:
            The new fitness, also stored in 'self.fitness'
        """
        self.set_active_nodes()
        self.fitness = self._config.fitness_function(self._config, self, dataset)
        return self.fitness

    def __str__(self):
        # make sure the active markers reflect the current genes
        self.set_active_nodes()

        lines = [f"({i}):\tinput" for i in range(self._num_inputs)]

        for position, node in enumerate(self.nodes):
            line  = f"({self._num_inputs + position}):\t{self.function_set.name(node.function)}\t"
            line += ''.join(f"{address},{weight:+.1f}\t" for address, weight in zip(node.connections, node.weights))
            if node.active:
                line += "*"
            lines.append(line)

        lines.append("outputs: " + ''.join(f"{address} " for address in self.output_genes))
        return '\n'.join(lines)

    def __repr__(self):
        return f"Chromosome({self.to_dict()!r})"
