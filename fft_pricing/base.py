# fft_pricing/base.py
from enum import Enum
from abc import ABC, abstractmethod


class OPTION_TYPE(Enum):
    CALL_OPTION = 'call'
    PUT_OPTION = 'put'


class OptionPricingModel(ABC):
    """Interface of the closed-form reference pricers the FFT results are checked against."""

    def calculate_option_price(self, option_type):
        """
        option_type: OPTION_TYPE member or a string starting with 'call' / 'put'
        (case-insensitive, so 'Call Option' works too).
        """
        if isinstance(option_type, OPTION_TYPE):
            opt = option_type.value
        else:
            opt = str(option_type).strip().lower()

        if opt.startswith('call'):
            return self._calculate_call_option_price()
        elif opt.startswith('put'):
            return self._calculate_put_option_price()
        else:
            raise ValueError(f"Unsupported option_type: {option_type}")

    @abstractmethod
    def _calculate_call_option_price(self):
        raise NotImplementedError()

    @abstractmethod
    def _calculate_put_option_price(self):
        raise NotImplementedError()
