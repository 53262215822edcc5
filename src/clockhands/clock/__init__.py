from clockhands.clock.angles import HandAngles as HandAngles
from clockhands.clock.angles import Point as Point
from clockhands.clock.angles import TimeOfDay as TimeOfDay
from clockhands.clock.angles import \
    angles_since_midnight as angles_since_midnight
from clockhands.clock.angles import compute_angles as compute_angles
from clockhands.clock.angles import dial_marks as dial_marks
from clockhands.clock.angles import polar_to_cartesian as polar_to_cartesian
from clockhands.clock.engine import ClockEngine as ClockEngine
from clockhands.clock.engine import ClockFrame as ClockFrame
from clockhands.clock.engine import ClockPhase as ClockPhase
from clockhands.clock.smoothing import PID as PID
from clockhands.clock.smoothing import \
    ExponentialSmoother as ExponentialSmoother
from clockhands.clock.smoothing import HandSmoother as HandSmoother
from clockhands.clock.wallclock import WallClock as WallClock
from clockhands.clock.wallclock import \
    decompose_duration as decompose_duration
from clockhands.clock.wallclock import format_readout as format_readout
