"""
genetic.py — Toy Genetic Algorithm
===================================
Evolves points x ∈ [0, 1] towards the peak of f(x) = 4·x·(1-x) (1.0 at 0.5).

Per generation:
  • Selection – sort by fitness, keep the top half (at least one) as parents
  • Crossover – child x = mean of two parents drawn uniformly with replacement
  • Mutation  – with probability 0.3, add a uniform delta in [-0.05, 0.05]
  • Clamp x to [0, 1] and recompute fitness from x

One snapshot per generation, generation 0 being the initial population as
given.  Population order in a snapshot is birth order, not fitness order.
There is no elitism beyond the parent cut, so best fitness may dip.
"""

import random
from typing import Generator, List, Optional, Sequence

from algorithms.step import GenerationStep, Individual


MUTATION_RATE = 0.3
MUTATION_DELTA = 0.05

PSEUDOCODE: List[str] = [
    "def Evolve(population, G):",                  # 0
    "    for gen in 1 .. G:",                      # 1
    "        parents ← top half by fitness",       # 2
    "        while |children| < |population|:",    # 3
    "            p1, p2 ← random parents",         # 4
    "            x ← (p1.x + p2.x) / 2",           # 5
    "            with p=0.3: x ← x + U(-0.05, 0.05)",  # 6
    "            x ← clamp(x, 0, 1)",              # 7
    "            children.add((x, f(x)))",         # 8
    "        population ← children",               # 9
]


def fitness(x: float) -> float:
    return 4 * x * (1 - x)


def random_population(size: int, rng: Optional[random.Random] = None) -> List[Individual]:
    """`size` individuals with x uniform in [0, 1)."""
    if size <= 0:
        raise ValueError(f"population size must be positive, got {size}")
    rng = rng if rng is not None else random.Random()
    population = []
    for _ in range(size):
        x = rng.random()
        population.append(Individual(x=x, fitness=fitness(x)))
    return population


def _best(population: Sequence[Individual]) -> float:
    return max(ind.fitness for ind in population)


def _breed(parents: Sequence[Individual], rng: random.Random) -> Individual:
    p1 = rng.choice(parents)
    p2 = rng.choice(parents)
    x = (p1.x + p2.x) / 2
    if rng.random() < MUTATION_RATE:
        x += rng.uniform(-MUTATION_DELTA, MUTATION_DELTA)
    x = min(1.0, max(0.0, x))
    return Individual(x=x, fitness=fitness(x))


def genetic_algorithm(
    initial_population: Sequence[Individual],
    generations: int,
    rng: Optional[random.Random] = None,
) -> Generator[GenerationStep, None, None]:
    """
    Args:
        initial_population : Generation 0, must not be empty.
        generations        : Number of generations to breed after generation 0.
        rng                : Random source for parent draws and mutation.
    """
    if not initial_population:
        raise ValueError("initial population must not be empty")
    if generations < 0:
        raise ValueError(f"generations must be >= 0, got {generations}")
    rng = rng if rng is not None else random.Random()

    population = tuple(initial_population)
    yield GenerationStep(generation=0, population=population, best_fitness=_best(population))

    for gen in range(1, generations + 1):
        ranked = sorted(population, key=lambda ind: ind.fitness, reverse=True)
        parents = ranked[:max(1, len(ranked) // 2)]
        population = tuple(_breed(parents, rng) for _ in range(len(population)))
        yield GenerationStep(generation=gen, population=population, best_fitness=_best(population))


def generate_genetic_algorithm_steps(
    initial_population: Sequence[Individual],
    generations: int,
    rng: Optional[random.Random] = None,
) -> List[GenerationStep]:
    return list(genetic_algorithm(initial_population, generations, rng))
