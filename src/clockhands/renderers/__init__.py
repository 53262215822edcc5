from clockhands.renderers.analog_clock import \
    AnalogClockRenderer as AnalogClockRenderer
from clockhands.renderers.base import StatefulRenderer as StatefulRenderer
from clockhands.renderers.clock_screen import ClockScreen as ClockScreen
from clockhands.renderers.digital_readout import \
    DigitalReadoutRenderer as DigitalReadoutRenderer
