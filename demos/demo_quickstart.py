# demos/demo_quickstart.py
from densemat.core.typedefs import MatrixXd, Vector3d


def main():
    # Just prove imports & a basic product work
    a = MatrixXd.random(3, 3, seed=0)
    v = Vector3d.constant(1.0)
    print("Imports OK. a * v shape:", (a * v).shape)


if __name__ == "__main__":
    main()
