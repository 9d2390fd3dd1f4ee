"""
Validation layer for the heuristics library.
Provides validators for algorithm and termination configuration.
"""

import math
from numbers import Real
from typing import Dict

from heuristics.core.exceptions import InvalidConfigurationError


class ConfigValidator:
    """Validate configuration parameters."""

    @staticmethod
    def validate_sa_config(config: Dict) -> bool:
        """
        Validate Simulated Annealing configuration.

        Args:
            config: SA configuration dictionary (keys are optional)

        Returns:
            True if valid, raises InvalidConfigurationError otherwise

        Raises:
            InvalidConfigurationError: If configuration is invalid
        """
        if 'temperature' in config:
            temperature = config['temperature']
            if not _is_number(temperature) or not temperature > 0:
                raise InvalidConfigurationError(
                    parameter='temperature',
                    value=temperature,
                    expected="> 0"
                )

        if 'cooling_factor' in config:
            factor = config['cooling_factor']
            if not _is_number(factor) or not 0 <= factor < 1:
                raise InvalidConfigurationError(
                    parameter='cooling_factor',
                    value=factor,
                    expected="[0, 1)"
                )

        return True

    @staticmethod
    def validate_adaptive_config(config: Dict) -> bool:
        """
        Validate adaptive operator selection configuration.

        Args:
            config: Adaptive selection configuration dictionary (keys are optional)

        Returns:
            True if valid, raises InvalidConfigurationError otherwise

        Raises:
            InvalidConfigurationError: If configuration is invalid
        """
        if 'decay' in config:
            decay = config['decay']
            if not _is_number(decay) or not 0 <= decay <= 1:
                raise InvalidConfigurationError(
                    parameter='decay',
                    value=decay,
                    expected="[0, 1]"
                )

        # Weights must stay non-negative, so rewards must be too
        for key in ('reward_improved_best', 'reward_accepted', 'reward_rejected'):
            if key in config:
                reward = config[key]
                if not _is_number(reward) or not reward >= 0:
                    raise InvalidConfigurationError(
                        parameter=key,
                        value=reward,
                        expected=">= 0"
                    )

        return True

    @staticmethod
    def validate_termination_config(config: Dict) -> bool:
        """
        Validate termination configuration.

        Args:
            config: Termination configuration dictionary (keys are optional)

        Returns:
            True if valid, raises InvalidConfigurationError otherwise

        Raises:
            InvalidConfigurationError: If configuration is invalid
        """
        if config.get('max_iterations') is not None:
            max_iterations = config['max_iterations']
            if isinstance(max_iterations, bool) or not isinstance(max_iterations, int) \
                    or max_iterations < 1:
                raise InvalidConfigurationError(
                    parameter='max_iterations',
                    value=max_iterations,
                    expected="integer >= 1"
                )

        if config.get('time_limit') is not None:
            time_limit = config['time_limit']
            if not _is_number(time_limit) or not time_limit > 0:
                raise InvalidConfigurationError(
                    parameter='time_limit',
                    value=time_limit,
                    expected="> 0 seconds"
                )

        if 'aggregation' in config:
            valid_modes = ['any', 'all']
            if config['aggregation'] not in valid_modes:
                raise InvalidConfigurationError(
                    parameter='aggregation',
                    value=config['aggregation'],
                    expected=f"One of {valid_modes}"
                )

        return True

    @staticmethod
    def validate_run_config(config: Dict) -> bool:
        """
        Validate run bookkeeping configuration.

        Args:
            config: Run configuration dictionary (keys are optional)

        Returns:
            True if valid, raises InvalidConfigurationError otherwise
        """
        if 'log_every' in config:
            log_every = config['log_every']
            if isinstance(log_every, bool) or not isinstance(log_every, int) or log_every < 1:
                raise InvalidConfigurationError(
                    parameter='log_every',
                    value=log_every,
                    expected="integer >= 1"
                )

        if 'record_history' in config and not isinstance(config['record_history'], bool):
            raise InvalidConfigurationError(
                parameter='record_history',
                value=config['record_history'],
                expected="bool"
            )

        return True


def _is_number(value) -> bool:
    """True for real, non-NaN numbers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)
