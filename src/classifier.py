import numpy as np
from dataclasses import dataclass
from tqdm import tqdm

from gaussian import density, log_density
from gda import CLASSES


@dataclass(frozen=True)
class Posterior:
    joint0: float
    joint1: float
    posterior0: float
    posterior1: float
    predicted: int


class Classifier:
    def __init__(self, params, verbose=False):
        self.params = params
        self.verbose = verbose

    def joint(self, x, label):
        """ density of x under class label times the class prior """
        return density(x, self.params.mean(label), self.params.sigma) * self.params.prior(label)

    def log_joint(self, x, label):
        with np.errstate(divide="ignore"):
            log_prior = np.log(self.params.prior(label))
        return log_density(x, self.params.mean(label), self.params.sigma) + float(log_prior)

    def maximum_a_posteriori(self, x):
        """ map for binary classification

        The decision and the normalized posteriors come from the log scores,
        so they stay defined where the raw joints underflow to 0.
        """
        joint0, joint1 = [self.joint(x, k) for k in CLASSES]
        log_joint0, log_joint1 = [self.log_joint(x, k) for k in CLASSES]

        log_evidence = np.logaddexp(log_joint0, log_joint1)
        posterior0 = float(np.exp(log_joint0 - log_evidence))
        posterior1 = float(np.exp(log_joint1 - log_evidence))

        # ties go to class 0
        predicted = 1 if log_joint1 > log_joint0 else 0
        return Posterior(joint0, joint1, posterior0, posterior1, predicted)

    def predict(self, points):
        return [
            self.maximum_a_posteriori(x).predicted
            for x in tqdm(points, desc="Classifying", unit="pt", disable=not self.verbose)
        ]
