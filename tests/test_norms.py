"""
Tests for Norms used as network nodes
"""

import logging

import pytest

from norm_network import (
    AgentAction,
    GeneralisationNetwork,
    LoggerConfig,
    NetworkConfig,
    Norm,
    NormModality,
    NodeState,
    setup_logging,
)


class TestNormModality:
    def test_labels(self):
        assert str(NormModality.PROHIBITION) == "prh"
        assert str(NormModality.OBLIGATION) == "obl"
        assert NormModality.PROHIBITION.label == "prh"

    def test_only_two_modalities(self):
        assert len(NormModality) == 2


class TestNorm:
    def test_operator(self):
        norm = Norm(NormModality.PROHIBITION, AgentAction("Go"))
        assert str(norm) == "prh(Go)"

    def test_with_precondition(self):
        norm = Norm(NormModality.OBLIGATION, AgentAction("Stop"),
                    precondition="left(car)")
        assert str(norm) == "IF left(car) THEN obl(Stop)"

    def test_value_semantics(self):
        first = Norm(NormModality.PROHIBITION, AgentAction("Go"), "front(car)")
        second = Norm(NormModality.PROHIBITION, AgentAction("Go"), "front(car)")
        assert first == second
        assert len({first, second}) == 1

    def test_norms_as_network_nodes(self):
        specific = Norm(NormModality.PROHIBITION, AgentAction("Go"), "front(car) & left(car)")
        general = Norm(NormModality.PROHIBITION, AgentAction("Go"), "front(car)")

        network = GeneralisationNetwork()
        network.add(specific)
        network.add(Norm(NormModality.PROHIBITION, AgentAction("Go"), "front(car)"))
        network.add(general)
        network.add_generalisation(specific, general)
        network.set_state(general, NodeState.ACTIVE)

        assert len(network) == 2
        assert network.get_parents(specific) == [general]
        assert network.get_represented_nodes() == [general, specific]


class TestConfiguration:
    def test_network_config_defaults(self):
        config = NetworkConfig()
        assert config.eager_refresh is True
        assert config.propagate_levels is False

    def test_network_config_validation(self):
        with pytest.raises(ValueError):
            NetworkConfig(eager_refresh="yes")

    def test_setup_logging(self):
        loggers = setup_logging(LoggerConfig(level=logging.DEBUG))
        assert loggers["network"].name == "norm_network"
        assert loggers["generalisation"].name == "norm_network.generalisation"
        assert loggers["network"].level == logging.DEBUG


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
