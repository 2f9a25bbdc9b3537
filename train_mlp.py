"""
Train a [3] -> [4, 4, 1] tanh MLP on the four-example toy dataset.
"""

import argparse

from aad_mlp.nn import TrainingConfig, build_network, train

XS = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
YS = [1.0, -1.0, -1.0, 1.0]


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Gradient descent on a small tanh MLP',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--epochs', type=int, default=20,
                        help='Number of full-batch epochs')
    parser.add_argument('--learning-rate', type=float, default=0.01,
                        help='Gradient descent step size')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for weight initialization (random if omitted)')
    parser.add_argument('--layers', type=str, default='4,4,1',
                        help='Comma-separated layer widths; the last must be 1')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final summary')
    return parser.parse_args(argv)


def parse_layers(layer_str):
    """Parse '4,4,1' into [4, 4, 1]."""
    return [int(s) for s in layer_str.split(',') if s.strip()]


def main(argv=None):
    args = parse_args(argv)
    config = TrainingConfig(
        epochs=args.epochs,
        learning_rate=args.learning_rate,
        seed=args.seed,
        verbose=not args.quiet,
    )

    network = build_network(len(XS[0]), parse_layers(args.layers), config)
    result = train(network, XS, YS, config)

    print("=" * 50)
    print(f"Network:      {network}")
    print(f"Parameters:   {len(network.parameters())}")
    if result['loss_history']:
        print(f"Initial loss: {result['loss_history'][0]:.6f}")
        print(f"Final loss:   {result['loss_history'][-1]:.6f}")
    print(f"Runtime:      {result['runtime_sec']:.3f} s")
    print("Predictions vs targets:")
    for pred, target in zip(result['predictions'], YS):
        print(f"  {pred:+.4f}  (target {target:+.1f})")
    return result


if __name__ == '__main__':
    main()
