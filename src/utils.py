from sklearn import metrics
import numpy as np


def confusion_matrix(predicted, true):
    # rows are true classes, columns predicted
    # TN top left
    return metrics.confusion_matrix(true, predicted, labels=[0, 1])


def _ratio(numerator, denominator):
    # 0 when the denominator is empty, as sklearn does
    return float(numerator / denominator) if denominator else 0.0


def accuracy(confusion_matrix):
    return _ratio(np.trace(confusion_matrix), np.sum(confusion_matrix))


def precision(confusion_matrix):
    # TP / (TP + FP)
    return _ratio(confusion_matrix[1, 1], confusion_matrix[1, 1] + confusion_matrix[0, 1])


def recall(confusion_matrix):
    # TP / (TP + FN)
    return _ratio(confusion_matrix[1, 1], confusion_matrix[1, 1] + confusion_matrix[1, 0])


def false_positive_rate(confusion_matrix):
    # FP / (FP + TN)
    return _ratio(confusion_matrix[0, 1], confusion_matrix[0, 1] + confusion_matrix[0, 0])


def f1_score(confusion_matrix):
    prec = precision(confusion_matrix)
    rec = recall(confusion_matrix)

    return _ratio(2 * prec * rec, prec + rec)
