import argparse
import sys

import matplotlib.pyplot as plt
import numpy as np

from classifier import Classifier
from dataset import DatasetError, read_data
from errors import GDAError
from gda import GaussianDiscriminantAnalysis
from linalg import Vector2
from utils import (
    confusion_matrix,
    accuracy,
    false_positive_rate,
    precision,
    recall,
    f1_score,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Fit a two-class Gaussian Discriminant Analysis model on 2D data"
    )

    parser.add_argument('data',
                    help='csv file with x,y,class records, or a directory of such files',
                    type=str)

    parser.add_argument('--query',
                    help='point to classify, may be repeated',
                    type=float,
                    nargs=2,
                    metavar=('X', 'Y'),
                    action='append',
                    default=[])

    parser.add_argument('--load-dir',
                    help='load fitted parameters from this directory instead of fitting',
                    type=str,
                    required=False,
                    default=None)

    parser.add_argument('--save-dir',
                    help='save the fitted parameters to this directory',
                    type=str,
                    required=False,
                    default=None)

    parser.add_argument('--plot',
                    help='save a scatter plot with the decision boundary to this path',
                    type=str,
                    required=False,
                    default=None)

    parser.add_argument('--verbose',
                    help='print every loaded record and show progress',
                    action='store_true')

    return parser.parse_args(argv)


def print_parameters(params):
    print("Fitted parameters:")
    print(f"  phi   = {params.phi}")
    print(f"  mu0   = ({params.mu0.x}, {params.mu0.y})")
    print(f"  mu1   = ({params.mu1.x}, {params.mu1.y})")
    print(f"  sigma = [[{params.sigma.a}, {params.sigma.b}], [{params.sigma.c}, {params.sigma.d}]]")


def plot_decision_boundary(observations, model, path):
    points = np.array([[o.x, o.y] for o in observations])
    labels = np.array([o.label for o in observations])

    plt.figure(figsize=(8, 8))
    for label, color in zip((0, 1), ("tab:blue", "tab:red")):
        class_points = points[labels == label]
        plt.scatter(class_points[:, 0], class_points[:, 1], c=color, label=f"class {label}")

    try:
        xs = np.linspace(points[:, 0].min() - 1, points[:, 0].max() + 1, 100)
        plt.plot(xs, model.decision_boundary(xs), "k--", label="decision boundary")
    except GDAError as e:
        print("Decision boundary not drawn:", e)

    plt.xlabel("x")
    plt.ylabel("y")
    plt.legend()
    plt.savefig(path)
    plt.close()
    print("Figure saved to:", path)


def evaluate(observations, classifier):
    predictions = classifier.predict([o.features for o in observations])
    c_matrix = confusion_matrix(predictions, [o.label for o in observations])
    print("Confusion matrix:")
    print(c_matrix)
    print("Accuracy:", accuracy(c_matrix))
    print("Precision:", precision(c_matrix))
    print("Recall:", recall(c_matrix))
    print("False positive rate:", false_positive_rate(c_matrix))
    print("F1 score:", f1_score(c_matrix))


def run(args):
    observations = read_data(args.data)
    print(f"Loaded {len(observations)} records from {args.data}")
    if args.verbose:
        for o in observations:
            print(f"Observation: {o.x}, {o.y}, {o.label}")

    model = GaussianDiscriminantAnalysis()
    if args.load_dir:
        model.load_model(args.load_dir)
        print("Model loaded from:", args.load_dir)
    else:
        model.fit(observations)
    print_parameters(model.params)

    if args.save_dir:
        model.save_model(args.save_dir)
        print("Model saved to:", args.save_dir)

    classifier = Classifier(model.params, verbose=args.verbose)
    for qx, qy in args.query:
        posterior = classifier.maximum_a_posteriori(Vector2(qx, qy))
        print(f"Query ({qx}, {qy}):")
        print(f"  joint(0) = {posterior.joint0}, joint(1) = {posterior.joint1}")
        print(f"  posterior(0) = {posterior.posterior0}, posterior(1) = {posterior.posterior1}")
        print(f"  predicted class: {posterior.predicted}")

    evaluate(observations, classifier)

    if args.plot:
        plot_decision_boundary(observations, model, args.plot)


def main(argv=None):
    args = parse_args(argv)
    print("Start")
    try:
        run(args)
    except (GDAError, DatasetError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print("Stop")
    return 0


if __name__ == "__main__":
    sys.exit(main())
