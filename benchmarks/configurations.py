"""configurations for benchmarks."""

configurations = {
    # Grid access configurations
    "random_access": {
        "small": {
            "seeds": 5,
            "replications": 5,
            "operations": 10_000,
            "parameters": {
                "width": 100,
                "height": 100,
            },
        },
        "large": {
            "seeds": 3,
            "replications": 3,
            "operations": 100_000,
            "parameters": {
                "width": 1000,
                "height": 1000,
            },
        },
    },
    "full_sweep": {
        "small": {
            "seeds": 1,
            "replications": 5,
            "operations": None,
            "parameters": {
                "width": 100,
                "height": 100,
            },
        },
        "large": {
            "seeds": 1,
            "replications": 3,
            "operations": None,
            "parameters": {
                "width": 1000,
                "height": 1000,
            },
        },
    },
}
