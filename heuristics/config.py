# Configuration parameters for the heuristics library
# Defaults used by builders, selectors and the demo driver

# Simulated Annealing Configuration
SA_CONFIG = {
    'temperature': 100.0,       # Initial (or constant) temperature
    'cooling_factor': 0.0,      # T <- T * (1 - factor) after every proposal; 0 keeps T constant
}

# Adaptive operator selection
# Weight update: w <- (1 - decay) * w + decay * reward
ADAPTIVE_CONFIG = {
    'decay': 0.5,
    'reward_improved_best': 3.0,
    'reward_accepted': 1.0,
    'reward_rejected': 0.0,
}

# Termination criteria
TERMINATION_CONFIG = {
    'max_iterations': 1000,
    'time_limit': None,         # Seconds; None disables the deadline
    'aggregation': 'any',       # 'any' (OR) or 'all' (AND)
}

# Run bookkeeping
RUN_CONFIG = {
    'record_history': True,     # Keep per-iteration records for metrics/plots
    'log_every': 100,           # Progress line every N iterations (DEBUG)
}

# Logging
LOGGING_CONFIG = {
    'level': 'INFO',
    'log_dir': None,            # None = console only
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'datefmt': '%Y-%m-%d %H:%M:%S',
}

# Visualization Configuration
VIZ_CONFIG = {
    'figure_size': (12, 8),
    'dpi': 150,
    'colors': ['#0000FF', '#FF0000', '#00FF00', '#FFA500', '#800080', '#A52A2A', '#FFC0CB', '#808080'],
    'line_width': 2,
    'font_size': 12
}
