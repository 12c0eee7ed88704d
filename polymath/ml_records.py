"""Records for learning models, Markov models and state machines."""

from __future__ import annotations

from dataclasses import dataclass, field


def _grid_dims(grid: list[list[int]], name: str) -> tuple[int, int]:
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError(f"{name} must be rectangular.")
    return len(grid), len(grid[0]) if grid else 0


@dataclass
class PerceptronNetwork:
    """A feed-forward layer and a matrix of hidden layers, each with a bias unit."""

    number_of_feed_forward_units: int
    number_of_hidden_layers: int
    number_of_hidden_units: int
    feed_forward_vector: list[float] = field(default_factory=list)
    hidden_matrix: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if min(
            self.number_of_feed_forward_units,
            self.number_of_hidden_layers,
            self.number_of_hidden_units,
        ) < 0:
            raise ValueError("Unit and layer counts must not be negative.")
        inputs = self.number_of_feed_forward_units + 1
        if not self.feed_forward_vector:
            self.feed_forward_vector = [0.0] * inputs
        elif len(self.feed_forward_vector) != inputs:
            raise ValueError(f"feed_forward_vector must hold {inputs} values.")
        shape = (self.number_of_hidden_units + 1, self.number_of_hidden_layers)
        if not self.hidden_matrix:
            self.hidden_matrix = [[0.0] * shape[1] for _ in range(shape[0])]
        elif _grid_dims(self.hidden_matrix, "hidden_matrix") != shape:
            raise ValueError(f"hidden_matrix must be {shape[0]} by {shape[1]}.")


@dataclass
class Reinforcement:
    reward: int = 0
    negative_reward: int = 0

    @property
    def net_reward(self) -> int:
        return self.reward - self.negative_reward


@dataclass
class Cluster:
    """Classification goals by attributes, and clusters by data points."""

    classification_matrix: list[list[int]] = field(default_factory=list)
    clusters: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _grid_dims(self.classification_matrix, "classification_matrix")
        _grid_dims(self.clusters, "clusters")

    @property
    def number_of_classification_goals(self) -> int:
        return len(self.classification_matrix)

    @property
    def number_of_attributes(self) -> int:
        return _grid_dims(self.classification_matrix, "classification_matrix")[1]

    @property
    def number_of_clusters(self) -> int:
        return len(self.clusters)

    @property
    def number_of_data_points(self) -> int:
        return _grid_dims(self.clusters, "clusters")[1]


@dataclass
class Leaf:
    stems: list[int] = field(default_factory=list)
    data: str = ""

    @property
    def number_of_stems(self) -> int:
        return len(self.stems)


@dataclass
class MlVector:
    values: list[float] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.values)


@dataclass
class Regressor:
    regressions: list[float] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.regressions)


@dataclass
class Gradients:
    gradients: list[float] = field(default_factory=list)

    @property
    def number_of_gradients(self) -> int:
        return len(self.gradients)


@dataclass
class Transformer:
    """Embedding vectors of equal length and a table of tuned parameters."""

    vectors: list[list[float]] = field(default_factory=list)
    parameters: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _grid_dims(self.vectors, "vectors")
        _grid_dims(self.parameters, "parameters")

    @property
    def number_of_vectors(self) -> int:
        return len(self.vectors)

    @property
    def length_of_vectors(self) -> int:
        return _grid_dims(self.vectors, "vectors")[1]

    @property
    def number_of_parameters(self) -> int:
        return len(self.parameters)

    @property
    def number_of_tuners(self) -> int:
        return _grid_dims(self.parameters, "parameters")[1]


@dataclass
class MarkovNode:
    """A named node and the indices of the nodes it can move to."""

    name: str
    transitions: list[int] = field(default_factory=list)


@dataclass
class MarkovModel:
    """Nodes whose transitions refer to positions in ``nodes``."""

    nodes: list[MarkovNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        count = len(self.nodes)
        for node in self.nodes:
            if any(not 0 <= target < count for target in node.transitions):
                raise ValueError(f"Node {node.name!r} has a transition outside the model.")

    @property
    def number_of_nodes(self) -> int:
        return len(self.nodes)


@dataclass
class State:
    state_name: str = ""
    state_id: int = 0
    transitions: list[int] = field(default_factory=list)

    @property
    def number_of_transitions(self) -> int:
        return len(self.transitions)