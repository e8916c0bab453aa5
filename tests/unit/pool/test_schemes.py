"""
Unit tests for the selection and reproduction schemes.
"""

import pytest

from evocgp.genotype import Chromosome
from evocgp.pool     import mutate_random_parent, pick_highest, reproduction_schemes, selection_schemes


@pytest.fixture
def config(make_config):
    return make_config(num_nodes=6, mu=2, lambda_=4)


def chromosomes_with_fitness(config, fitness_values):
    chromosomes = []
    for fitness in fitness_values:
        chromosome = Chromosome(config)
        chromosome.fitness = fitness
        chromosomes.append(chromosome)
    return chromosomes


class TestPickHighest:

    def test_in_table(self):
        assert selection_schemes["pick_highest"] is pick_highest

    def test_fittest_become_parents(self, config):
        parents    = chromosomes_with_fitness(config, [9.0, 9.0])
        candidates = chromosomes_with_fitness(config, [5.0, 1.0, 7.0, 3.0])
        expected   = [candidates[1].to_dict(), candidates[3].to_dict()]

        pick_highest(config, parents, candidates)

        assert [parent.fitness for parent in parents] == [1.0, 3.0]
        assert [parent.to_dict() for parent in parents] == expected

    def test_parents_are_copies(self, config):
        parents    = chromosomes_with_fitness(config, [9.0, 9.0])
        candidates = chromosomes_with_fitness(config, [5.0, 1.0, 7.0, 3.0])
        parent_objects = list(parents)

        pick_highest(config, parents, candidates)

        assert parents[0] is parent_objects[0]
        assert all(parent is not candidate for parent in parents for candidate in candidates)

    def test_first_and_last_are_swapped_before_sorting(self, config):
        """With all fitness values equal the last candidate comes first."""
        parents    = chromosomes_with_fitness(config, [9.0, 9.0])
        candidates = chromosomes_with_fitness(config, [2.0, 2.0, 2.0, 2.0])
        first, second, last = candidates[0].to_dict(), candidates[1].to_dict(), candidates[-1].to_dict()

        pick_highest(config, parents, candidates)

        assert parents[0].to_dict() == last
        assert parents[1].to_dict() == second
        assert candidates[-1].to_dict() == first

    def test_sort_is_stable(self, config):
        parents    = chromosomes_with_fitness(config, [9.0, 9.0])
        candidates = chromosomes_with_fitness(config, [0.5, 1.0, 1.0, 4.0])
        # after the swap: [4.0, 1.0(a), 1.0(b), 0.5]
        a, b = candidates[1].to_dict(), candidates[2].to_dict()

        pick_highest(config, parents, candidates)

        assert parents[0].fitness == 0.5
        assert parents[1].to_dict() == a
        assert candidates[2].to_dict() == b

    def test_deterministic(self, config):
        candidates = chromosomes_with_fitness(config, [3.0, 1.0, 2.0, 1.0, 5.0])
        copies     = [c.clone() for c in candidates]
        parents_a  = chromosomes_with_fitness(config, [0.0, 0.0])
        parents_b  = chromosomes_with_fitness(config, [0.0, 0.0])

        pick_highest(config, parents_a, candidates)
        pick_highest(config, parents_b, copies)

        assert [p.to_dict() for p in parents_a] == [p.to_dict() for p in parents_b]


class TestMutateRandomParent:

    def test_in_table(self):
        assert reproduction_schemes["mutate_random_parent"] is mutate_random_parent

    def test_without_mutation_children_are_copies_of_parents(self, make_config):
        config   = make_config(num_nodes=6, mutation_rate=0.0)
        parents  = chromosomes_with_fitness(config, [1.0, 2.0, 3.0])
        children = chromosomes_with_fitness(config, [None] * 10)
        parent_dicts = [p.to_dict() for p in parents]

        mutate_random_parent(config, parents, children)

        for child in children:
            assert child.to_dict() in parent_dicts

    def test_parents_are_unchanged(self, make_config):
        config   = make_config(num_nodes=6, mutation_rate=1.0)
        parents  = chromosomes_with_fitness(config, [1.0, 2.0])
        children = chromosomes_with_fitness(config, [None] * 4)
        before   = [p.to_dict() for p in parents]

        mutate_random_parent(config, parents, children)

        assert [p.to_dict() for p in parents] == before

    def test_every_child_is_mutated(self, make_config):
        config   = make_config(num_nodes=6)
        parents  = chromosomes_with_fitness(config, [1.0])
        children = chromosomes_with_fitness(config, [None] * 3)
        mutated  = []
        config.mutation_type = lambda cfg, chromosome: mutated.append(chromosome)

        mutate_random_parent(config, parents, children)

        assert mutated == children
