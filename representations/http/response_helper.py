"""
Response Helpers
Standardized Sanic responses for representations
"""
from typing import Any, Dict, Optional, Union
from sanic.response import HTTPResponse, html, json
from representations.database.conversion import models_to_array


class ResponseHelper:
    """
    Response helper for consistent JSON and HTML responses

    A model returned as the whole output is converted here. Models placed
    inside a mapping the file builds must be converted by the file itself:

        # views/representations/users/show.py
        from representations import models_to_array

        {'user': models_to_array(user), 'post_count': len(user.posts)}

    Example:
        @app.get('/users/<user_id:int>')
        async def show(request, user_id):
            user = await User.get(id=user_id)
            await user.fetch_related('posts')
            return ResponseHelper.representation('users/show', {'user': user})
    """

    @staticmethod
    def representation(
        file: str,
        data: Any = None,
        status: int = 200,
        folder: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> HTTPResponse:
        """
        Render a representation into a response

        String output is sent as HTML, anything else as JSON with models
        converted to dicts.

        Args:
            file: Representation name
            data: Representation data
            status: HTTP status code (default 200)
            folder: Representations folder (defaults to the configured one)
            headers: Extra response headers

        Returns:
            Sanic HTTPResponse
        """
        from representations.representation import Representation

        output = Representation.forge(file, data, folder=folder).output()

        if isinstance(output, str):
            return html(output, status=status, headers=headers)

        return ResponseHelper.json(output, status=status, headers=headers)

    @staticmethod
    def json(
        data: Any = None,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None
    ) -> HTTPResponse:
        """
        JSON response with models converted to dicts

        Example:
            return ResponseHelper.json(await User.all())
        """
        return json(models_to_array(data), status=status, headers=headers)

    @staticmethod
    def error(
        message: str,
        errors: Optional[Union[Dict[str, Any], list]] = None,
        status: int = 400,
        code: Optional[str] = None
    ) -> HTTPResponse:
        """
        Standardized error response

        Example:
            return ResponseHelper.error('Representation not found', status=404, code='NotFoundException')
        """
        payload: Dict[str, Any] = {'success': False, 'message': message}

        if errors is not None:
            payload['errors'] = errors
        if code is not None:
            payload['code'] = code

        return json(payload, status=status)
