"""
Example: Subgradient descent on the built-in test problems

Runs each built-in problem (quadratic, multimodal, non-smooth) with both the
fixed and the diminishing step schedule from the classic starting point
(2, -3), printing the stop reason, the final point and the wall-clock time.
"""

import logging

from subgrad import (
    DEFAULT_START,
    PROBLEMS,
    StepType,
    Timer,
    configure_logging,
    run,
)


def example_problem(name: str, step_type: StepType) -> None:
    """Minimize one built-in problem with the given schedule."""
    problem = PROBLEMS[name]
    print("=" * 60)
    print(f"{problem.description} -- {step_type.name.lower()} step")
    print("=" * 60)

    config = problem.config(
        start=DEFAULT_START,
        step_type=step_type,
        initial_step=0.1,
        max_iterations=2000,
    )
    with Timer(problem.name) as timer:
        result = run(config)

    print(f"Stop reason: {result.reason.name}")
    print(f"Message: {result.message}")
    print(f"Iterations: {result.nit}")
    print(f"Final point: ({result.x[0]:.6f}, {result.x[1]:.6f})")
    print(f"Objective: {result.fun:.8f}")
    if result.trace:
        last = result.trace[-1]
        print(f"Last recorded step: iteration {last.iteration}, step = {last.step_size:.3e}")
    if problem.minimizer is not None:
        print(f"Known minimizer: {problem.minimizer}")
    print(f"Elapsed: {timer.elapsed:.4f} s")
    print()


if __name__ == "__main__":
    configure_logging(level=logging.WARNING)

    print("\n" + "=" * 60)
    print("subgrad - Subgradient Descent Examples")
    print("=" * 60 + "\n")

    for name in PROBLEMS:
        for step_type in StepType:
            example_problem(name, step_type)

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
