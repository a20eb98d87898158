"""Print sample activation and loss values."""

import numpy as np

import mlprim.functions as F


def main():
    z = 2.0
    print("sigmoid(2) =", F.sigmoid(z))
    print("tanh(2) =", F.tanh(z))
    print("relu(2) =", F.relu(z))
    print("prelu(2) =", F.prelu(z, 0.1))
    print("elu(2) =", F.elu(z, 0.1))
    print("glu(2) =", F.glu(z))
    print("swish(2) =", F.swish(z))
    print("softplus(2) =", F.softplus(z, 0.1))
    print("mish(2) =", F.mish(z))

    ground = np.array([0.1, 1.0, 0.3, 0.5, 0.7])
    predicted = np.array([0.1, 0.3, 0.4, 0.1, 0.2])

    print("L1 =", F.l1(ground, predicted))
    print("L2 =", F.l2(ground, predicted))
    print("Huber =", F.huber(ground, predicted, 0.2))
    print("BCE =", F.binary_cross_entropy(ground, predicted))
    print("CE =", F.cross_entropy(ground, predicted))
    print("softmax =", F.softmax(predicted))
    print("KL =", F.kl_divergence(ground, predicted))
    print("contrastive =", F.contrastive(True, ground, predicted, 2.0))
    print("hinge =", F.hinge(ground, predicted))
    print("Triplet Ranking =", F.triplet_ranking(predicted, ground, predicted, 0.2))


if __name__ == "__main__":
    main()
