#    Copyright (C) 2020 Presidenza del Consiglio dei Ministri.
#    Please refer to the AUTHORS file for more information.
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#    GNU Affero General Public License for more details.
#    You should have received a copy of the GNU Affero General Public License
#    along with this program. If not, see <https://www.gnu.org/licenses/>.

from prometheus_client.metrics import Counter

from exposure_submission.monitoring.core import NAMESPACE, Subsystem

# NOTE: To monitor submissions, adding the fake information is important.
#  Fake requests are counted, yet never reach the key processing metrics below.

SUBMISSION_REQUESTS = Counter(
    namespace=NAMESPACE,
    subsystem=Subsystem.API.value,
    name="submission_requests",
    labelnames=("fake", "http_status"),
    documentation="Number of diagnosis keys submission requests the server responded to.",
)

KEYS_DROPPED = Counter(
    namespace=NAMESPACE,
    subsystem=Subsystem.API.value,
    name="keys_dropped",
    documentation="Total number of valid submitted keys left out for being outside the "
    "acceptance window.",
)

KEYS_STORED = Counter(
    namespace=NAMESPACE,
    subsystem=Subsystem.API.value,
    name="keys_stored",
    documentation="Total number of submitted keys handed to storage.",
)
