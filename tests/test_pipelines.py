"""
Structural tests for the aggregation pipeline builders.
"""
from bson import ObjectId

from videotube.infrastructure.db import pipelines
from videotube.infrastructure.db.documents import serialize_document


def _stage_names(pipeline):
    return [next(iter(stage)) for stage in pipeline]


class TestVideoSearchPipeline:
    def test_skips_before_limiting(self):
        pipeline = pipelines.video_search_pipeline("", page=3, limit=10, sort_by="views", ascending=False)

        names = _stage_names(pipeline)
        skip = names.index("$skip")
        assert names[skip + 1] == "$limit"
        assert pipeline[skip] == {"$skip": 20}
        assert pipeline[skip + 1] == {"$limit": 10}
        assert names.index("$sort") < skip

    def test_query_is_escaped(self):
        pipeline = pipelines.video_search_pipeline("a.b*", page=1, limit=5, sort_by="title", ascending=True)

        match = pipeline[0]["$match"]
        assert match["isPublished"] is True
        assert match["title"] == {"$regex": r"a\.b\*", "$options": "i"}

    def test_sort_direction_and_owner(self):
        owner = ObjectId()

        pipeline = pipelines.video_search_pipeline("", 1, 5, "createdAt", ascending=True, owner_id=owner)

        assert pipeline[0]["$match"]["owner"] == owner
        assert "title" not in pipeline[0]["$match"]
        assert pipeline[1]["$sort"] == {"createdAt": 1, "_id": 1}


class TestViewerFlags:
    def test_anonymous_viewer_gets_literal_false(self):
        assert pipelines.viewer_flag(None, "$likes.likedBy") == {"$literal": False}

    def test_viewer_is_matched_by_id(self):
        viewer = ObjectId()

        assert pipelines.viewer_flag(viewer, "$likes.likedBy") == {"$in": [viewer, "$likes.likedBy"]}


class TestRecommendedPipeline:
    def test_excludes_source_and_limits(self):
        video_id = ObjectId()

        pipeline = pipelines.recommended_videos_pipeline(video_id, ["c++", "python"], limit=4)

        match = pipeline[0]["$match"]
        assert match["_id"] == {"$ne": video_id}
        assert match["isPublished"] is True
        assert match["$or"][0]["title"]["$regex"] == r"c\+\+|python"
        assert {"$limit": 4} in pipeline


class TestCommentsPipeline:
    def test_pages_newest_first(self):
        pipeline = pipelines.video_comments_pipeline(ObjectId(), page=2, limit=5)

        assert pipeline[1]["$sort"] == {"createdAt": -1, "_id": -1}
        assert pipeline[2:4] == [{"$skip": 5}, {"$limit": 5}]


def test_serialize_document_converts_nested_ids():
    owner = ObjectId()

    doc = serialize_document({"_id": owner, "owner": {"_id": owner}, "videos": [owner]})

    assert doc == {"_id": str(owner), "owner": {"_id": str(owner)}, "videos": [str(owner)]}
