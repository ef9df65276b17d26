"""
Black-box search over LWR parameters with Optuna.

The optimizer only sees the selected part of the flat parameter vector
(here: offsets and slopes), as a trajectory optimizer would.

Usage:
    python examples/optuna_parameter_search.py
"""

import numpy as np
import optuna

from lwr import ModelParametersLWR


def make_model(n_basis=7):
    centers = np.linspace(-3, 3, n_basis).reshape(-1, 1)
    widths = np.full((n_basis, 1), 0.5 * (centers[1, 0] - centers[0, 0]))
    slopes = np.zeros((n_basis, 1))
    offsets = np.zeros((n_basis, 1))
    return ModelParametersLWR(centers, widths, slopes, offsets,
                              lines_pivot_at_max_activation=True)


def lwr_objective(trial: optuna.Trial, model, X, y, low, high):
    """Optuna objective: MSE of the model with trial values for the selected parameters."""
    values = [trial.suggest_float(f"p{i}", lo, hi)
              for i, (lo, hi) in enumerate(zip(low, high))]
    model.set_parameter_vector_selected(values)
    return float(np.mean((model.predict(X) - y) ** 2))


if __name__ == "__main__":
    X = np.linspace(-3, 3, 200).reshape(-1, 1)
    y = np.sin(X[:, 0])

    model = make_model()
    model.set_selected_parameters({"offsets", "slopes"})
    n_selected = model.get_parameter_vector_selected_size()
    low, high = -np.ones(n_selected) * 1.5, np.ones(n_selected) * 1.5

    study = optuna.create_study(direction="minimize")
    study.optimize(lambda trial: lwr_objective(trial, model, X, y, low, high), n_trials=200)

    print(f"\nBest MSE: {study.best_value:.4f}")

    best = [study.best_params[f"p{i}"] for i in range(n_selected)]
    model.set_parameter_vector_selected(best)
    print(model.parameter_summary())
    print(f"Activation cache: {model.cache.n_hits} hits, {model.cache.n_misses} misses")
