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

import logging
from typing import Optional

from mongoengine import connect, disconnect
from pymongo import MongoClient

from exposure_submission.core import config
from exposure_submission.core.exceptions import SubmissionException

_LOGGER = logging.getLogger(__name__)


class Managers:
    """
    Collection of managers, lazily initialized.
    """

    _submission_mongo: Optional[MongoClient] = None

    @property
    def submission_mongo(self) -> MongoClient:
        """
        Return the Mongo manager.

        :return: the Mongo manager.
        :raise: SubmissionException if the manager is not initialized.
        """
        if self._submission_mongo is None:
            raise SubmissionException("Cannot use the Mongo manager before initialising it.")
        return self._submission_mongo

    async def initialize(self) -> None:
        """
        Initialize managers on demand.
        """
        self._submission_mongo = connect(host=config.SUBMISSION_MONGO_URL)
        _LOGGER.info("Managers initialized.")

    async def teardown(self) -> None:
        """
        Perform teardown actions (e.g., close open connections).
        """
        if self._submission_mongo is not None:
            disconnect()
            self._submission_mongo = None
        _LOGGER.info("Managers torn down.")


managers = Managers()
