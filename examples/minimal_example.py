import libv as lv
from libv.utils import init_logger


def surface_normal(a, b, c):
    """Нормаль треугольника (a, b, c) – против часовой стрелки."""
    return lv.normalize((b - a).cross(c - a))


def main():
    logger = init_logger("INFO")

    a, b, c = lv.Vec3(0, 0, 0), lv.Vec3(1, 0, 0), lv.Vec3(0, 1, 0)
    n = surface_normal(a, b, c)
    logger.info(f"[Example] normal = {n}")

    # произвольная размерность – тот же набор операций
    V5 = lv.Vec[float, 5]
    samples = V5(1.0, 4.0, 2.0, 8.0, 5.0)
    logger.info(f"[Example] mean={samples.mean()} min={samples.min()} max={samples.max()}")

    try:
        n.at(3)
    except lv.OutOfRangeError as exc:
        logger.info(f"[Example] checked access failed in {exc}")


if __name__ == "__main__":
    main()
