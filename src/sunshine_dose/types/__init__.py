# primitives first

from .sky_condition import *
from .dose_endpoint import *
from .fitzpatrick_skin_type import *
from .time_of_day_mode import *
from .body_part import *
from .dose_rates import *
from .dose_threshold import *
from .sun_angle_sample import *

# then compound types

from .uv_spectrum import *
from .action_spectrum import *
from .dose_result import *
from .exposure_parameters import *
from .exposure_preferences import *
