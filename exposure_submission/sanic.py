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

from exposure_submission.apis import submission
from exposure_submission.core.managers import managers
from exposure_submission.helpers.sanic import create_app, run_app

sanic_app = create_app(
    api_title="Exposure Submission Service",
    api_description="The Exposure Submission Service provides an API for the Mobile Client to "
    "submit its Temporary Exposure Keys for the previous 14 days, in the case that the user is "
    "diagnosed and decides to share them. "
    "The submission can only take place with a TAN accepted by the verification service. "
    "Keys are validated as a whole batch: a single malformed key causes the whole submission to "
    "be rejected, while keys older than the retention period are silently left out. "
    "The Mobile Client also sends fake submissions, indistinguishable from the real ones, so that "
    "observing the network traffic does not reveal who has been diagnosed. "
    "Stored keys older than the retention period are automatically deleted from the database by "
    "an async cleanup job.",
    blueprints=(submission.bp,),
    managers=managers,
)

if __name__ == "__main__":  # pragma: no cover
    run_app(sanic_app)
