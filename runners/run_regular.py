# runners/run_regular.py
from loguru import logger

from config import AppConfig
from emwa import EMWA, Smoothing

def main(cfg: AppConfig = AppConfig()) -> float:
    logger.info("adding datapoints to a regular timeseries:")
    risk = EMWA(cfg.alpha_regular, Smoothing.STATIC)
    for i in range(1, cfg.points):
        risk.add(i)
    logger.info(f"value: {risk.value()}")
    return risk.value()

if __name__ == "__main__":
    main()
