#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Static strings and constants used in the matrixsteps package

    Step operation tags

        START = 'Start'

        RESULT = 'Result'

        SINGULAR = 'Singular'

        PARAMETERIZATION = 'Parameterization'

        SWAP = 'P'  # P{row}{row}

        SCALE = 'M'  # M{row}(scalar)

        ELIMINATE = 'E'  # E{target}{source}(scalar)

    Exact input

        DECIMAL_SCALE = 10000

    Floating point zones (characteristic polynomial only)

        POLY_TRIM_TOL = 1e-9

        ROOT_TOL = 1e-4

        INTEGER_TOL = 1e-9

        ROOT_SEARCH_RANGE = (-20, 20)

    Narration

        VARIABLE = 'x'
"""

# Step operation tags
START = 'Start'
RESULT = 'Result'
SINGULAR = 'Singular'
PARAMETERIZATION = 'Parameterization'
SWAP = 'P'
SCALE = 'M'
ELIMINATE = 'E'

# Exact input
DECIMAL_SCALE = 10000

# Floating point zones (characteristic polynomial only)
POLY_TRIM_TOL = 1e-9
ROOT_TOL = 1e-4
INTEGER_TOL = 1e-9
ROOT_SEARCH_RANGE = (-20, 20)

# Narration
VARIABLE = 'x'
