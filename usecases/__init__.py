from usecases.market import MarketUsecase

__all__ = ["MarketUsecase"]
